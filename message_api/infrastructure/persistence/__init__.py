"""
Persistence Layer - Repository implementations for domain ports.
"""

from message_api.infrastructure.persistence.in_memory_message_repository import (
    InMemoryMessageRepository,
)

__all__ = [
    "InMemoryMessageRepository",
]
