"""
Message Entity - A titled piece of content owned by one organization.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId


@dataclass
class Message:
    id: MessageId
    organization_id: OrganizationId
    title: str
    content: str
    created_at: datetime
    is_active: bool = True
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        organization_id: OrganizationId,
        title: str,
        content: str,
    ) -> Message:
        """Factory method to create a new active Message with a generated ID and timestamp."""
        return cls(
            id=MessageId.generate(),
            organization_id=organization_id,
            title=title,
            content=content,
            created_at=datetime.now(timezone.utc),
        )

    def revise(self, title: str, content: str, is_active: bool) -> None:
        """Apply an update. Identity, owner and created_at never change."""
        self.title = title
        self.content = content
        self.is_active = is_active
        self.updated_at = datetime.now(timezone.utc)
