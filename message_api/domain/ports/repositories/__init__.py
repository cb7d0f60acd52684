"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port is an abstract base class listing the methods the
domain needs. Infrastructure layer provides implementations.
"""

from message_api.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "MessageRepository",
]
