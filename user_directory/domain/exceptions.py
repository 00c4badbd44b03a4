# Standard library imports
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class FieldViolation:
    """A single failed field rule"""
    field: str
    rule: str
    message: str
    
    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class ValidationError(Exception):
    """
    Raised when one or more field rules reject a user record.
    
    Carries every violation found, not just the first one, so callers can
    report all problems with a submission at once.
    """
    
    def __init__(self, violations: Iterable[FieldViolation]) -> None:
        self.violations: List[FieldViolation] = list(violations)
        details = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(f"User validation failed: {details}")


class StoreError(Exception):
    """Raised when the document store is unreachable or rejects an operation"""
