"""
DTOs - Data Transfer Objects

- message.py -> MessageDTO

DTOs are for API input/output, entities are for business logic.
"""

from message_api.application.dto.message import MessageDTO

__all__ = [
    "MessageDTO",
]
