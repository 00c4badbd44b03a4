"""
Field-level validation rules for User records.

Rules are pure predicates: they never raise or log. ``validate_fields``
runs every rule attached to every present field and returns all violations so the
caller can reject a record with the complete list.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from .constants import UserFields
from .exceptions import FieldViolation


@dataclass(frozen=True)
class FieldRule:
    """A named predicate plus the message reported when it fails"""
    name: str
    check: Callable[[Any], bool]
    message: str
    
    def apply(self, field: str, value: Any) -> Optional[FieldViolation]:
        if self.check(value):
            return None
        return FieldViolation(field=field, rule=self.name, message=self.message)


def name_rule(min_length: int = 3) -> FieldRule:
    """Fails if the value is not a string of at least ``min_length`` characters"""
    return FieldRule(
        name="name",
        check=lambda value: isinstance(value, str) and len(value) >= min_length,
        message=f"Must be at least {min_length} characters",
    )


def _is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


def email_rule() -> FieldRule:
    """Fails if the value is not a syntactically valid email address"""
    return FieldRule(name="email", check=_is_email, message="Must be a valid email")


USER_FIELD_RULES: Dict[str, Sequence[FieldRule]] = {
    UserFields.FIRST_NAME: (name_rule(),),
    UserFields.LAST_NAME: (name_rule(),),
    UserFields.USERNAME: (name_rule(),),
    UserFields.EMAIL: (email_rule(),),
}


def validate_fields(
    data: Mapping[str, Any],
    rules: Mapping[str, Sequence[FieldRule]] = USER_FIELD_RULES,
) -> List[FieldViolation]:
    """
    Run every rule attached to every present field.
    
    Args:
        data: Field values keyed by wire field name; fields that are
            missing or null are not checked
        rules: Rules keyed by field name
        
    Returns:
        All violations in field order (empty when the record is valid)
    """
    violations: List[FieldViolation] = []
    for field, field_rules in rules.items():
        value = data.get(field)
        if value is None:
            continue
        for rule in field_rules:
            violation = rule.apply(field, value)
            if violation is not None:
                violations.append(violation)
    return violations
