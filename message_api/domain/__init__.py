"""
DOMAIN LAYER - Messages and the rules that govern them

This layer contains:
- Entities: Business objects with identity (Message)
- Value Objects: Immutable identifiers (MessageId, OrganizationId)
- Ports: Interfaces that infrastructure implements (MessageRepository)
- Services: Pure domain logic, no I/O (field validation)

RULES:
1. NO framework imports (no FastAPI, Pydantic, dishka)
2. NO I/O operations
3. Only depends on Python stdlib
"""
