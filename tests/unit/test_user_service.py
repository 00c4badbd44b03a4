"""
Unit tests for UserService (the data access layer shared by both front-ends).
"""
import pytest

from user_directory.application.services.user_service import UserService
from user_directory.domain.exceptions import ValidationError
from user_directory.domain.models.user import User


def _make_user(user_id: str, username: str, followers=None) -> User:
    return User(
        id=user_id,
        first_name="First",
        last_name="Last",
        username=username,
        email=f"{username}@x.com",
        followers=list(followers or []),
    )


VALID_INPUT = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "username": "ada",
    "email": "ada@x.com",
}


class TestReads:
    @pytest.mark.asyncio
    async def test_list_users(self, mock_user_repo):
        mock_user_repo.find_all.return_value = [_make_user("u1", "ada"), _make_user("u2", "bob")]
        result = await UserService(mock_user_repo).list_users()
        assert [user.username for user in result] == ["ada", "bob"]

    @pytest.mark.asyncio
    async def test_get_by_username_found(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = _make_user("u1", "ada")
        result = await UserService(mock_user_repo).get_user_by_username("ada")
        assert result.id == "u1"
        mock_user_repo.find_by_username.assert_awaited_once_with("ada")

    @pytest.mark.asyncio
    async def test_get_by_username_absent_is_none(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None
        assert await UserService(mock_user_repo).get_user_by_username("ghost") is None

    @pytest.mark.asyncio
    async def test_get_by_email(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = _make_user("u1", "ada")
        result = await UserService(mock_user_repo).get_user_by_email("ada@x.com")
        assert result.username == "ada"
        mock_user_repo.find_by_email.assert_awaited_once_with("ada@x.com")

    @pytest.mark.asyncio
    async def test_get_user_with_followers_absent(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None
        assert await UserService(mock_user_repo).get_user_with_followers("ghost") is None
        mock_user_repo.find_by_ids.assert_not_awaited()


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_create_success(self, mock_user_repo):
        mock_user_repo.insert.side_effect = lambda user: User(
            id="new-id",
            first_name=user.first_name,
            last_name=user.last_name,
            username=user.username,
            email=user.email,
            followers=user.followers,
        )
        result = await UserService(mock_user_repo).create_user(VALID_INPUT)

        assert result.id == "new-id"
        assert result.full_name == "Ada Lovelace"
        assert result.followers == []
        inserted = mock_user_repo.insert.await_args.args[0]
        assert inserted.id is None

    @pytest.mark.asyncio
    async def test_create_ignores_supplied_id(self, mock_user_repo):
        mock_user_repo.insert.side_effect = lambda user: user
        result = await UserService(mock_user_repo).create_user(dict(VALID_INPUT, id="chosen"))
        assert result.id is None

    @pytest.mark.asyncio
    async def test_create_keeps_supplied_followers(self, mock_user_repo):
        mock_user_repo.insert.side_effect = lambda user: user
        result = await UserService(mock_user_repo).create_user(dict(VALID_INPUT, followers=["f1", "f2"]))
        assert result.followers == ["f1", "f2"]

    @pytest.mark.asyncio
    async def test_create_with_missing_fields(self, mock_user_repo):
        mock_user_repo.insert.side_effect = lambda user: user
        result = await UserService(mock_user_repo).create_user({"username": "ada", "email": "ada@x.com"})
        assert result.username == "ada"
        assert result.first_name is None
        assert result.last_name is None
        mock_user_repo.insert.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_reports_all_violations(self, mock_user_repo):
        data = dict(VALID_INPUT, firstName="Bo", email="not-an-email")
        with pytest.raises(ValidationError) as excinfo:
            await UserService(mock_user_repo).create_user(data)

        assert {(v.field, v.rule) for v in excinfo.value.violations} == {
            ("firstName", "name"),
            ("email", "email"),
        }
        mock_user_repo.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_rejects_malformed_reference(self, mock_user_repo):
        mock_user_repo.is_valid_id.side_effect = lambda ref: ref != "bad"
        data = dict(VALID_INPUT, lastName="Li", followers=["good", "bad"])
        with pytest.raises(ValidationError) as excinfo:
            await UserService(mock_user_repo).create_user(data)

        assert [(v.field, v.rule) for v in excinfo.value.violations] == [
            ("lastName", "name"),
            ("followers", "reference"),
        ]
        mock_user_repo.insert.assert_not_awaited()


class TestResolveFollowers:
    @pytest.mark.asyncio
    async def test_no_followers_skips_store(self, mock_user_repo):
        result = await UserService(mock_user_repo).resolve_followers(_make_user("u1", "ada"))
        assert result == []
        mock_user_repo.find_by_ids.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_preserves_reference_order(self, mock_user_repo):
        mock_user_repo.find_by_ids.return_value = [_make_user("f1", "one"), _make_user("f2", "two")]
        user = _make_user("u1", "ada", followers=["f2", "f1"])
        result = await UserService(mock_user_repo).resolve_followers(user)
        assert [follower.id for follower in result] == ["f2", "f1"]

    @pytest.mark.asyncio
    async def test_drops_dangling_references(self, mock_user_repo):
        mock_user_repo.find_by_ids.return_value = [_make_user("f1", "one"), _make_user("f3", "three")]
        user = _make_user("u1", "ada", followers=["f3", "gone", "f1", "missing"])
        result = await UserService(mock_user_repo).resolve_followers(user)
        assert [follower.id for follower in result] == ["f3", "f1"]
        assert len(result) == len(user.followers) - 2

    @pytest.mark.asyncio
    async def test_get_user_with_followers(self, mock_user_repo):
        user = _make_user("u1", "ada", followers=["f1"])
        mock_user_repo.find_by_username.return_value = user
        mock_user_repo.find_by_ids.return_value = [_make_user("f1", "one")]
        found, followers = await UserService(mock_user_repo).get_user_with_followers("ada")
        assert found is user
        assert [follower.username for follower in followers] == ["one"]
