"""
OrganizationId Value Object - UUID wrapper for the tenant that owns messages.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class OrganizationId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Organization ID cannot be empty")
        if not self._is_valid_uuid(self.value):
            raise ValueError(f"Invalid organization ID (UUID): {self.value}")

    def _is_valid_uuid(self, value: str) -> bool:
        try:
            UUID(value)
            return True
        except ValueError:
            return False

    def __str__(self) -> str:
        return self.value
