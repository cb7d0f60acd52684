"""Value objects - immutable identifiers."""

from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

__all__ = [
    "MessageId",
    "OrganizationId",
]
