# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class User:
    """
    Pure domain model for User entity.
    
    ``followers`` holds identifiers of other users; a reference may point to
    a user that no longer exists. Name and email fields are optional; a
    missing name part counts as empty in ``full_name``, which is derived on
    read and never stored.
    """
    id: Optional[str]
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    followers: List[str] = field(default_factory=list)
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}"
