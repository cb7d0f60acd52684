"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  -> Write operations (CQRS)
- queries/   -> Read operations (CQRS)
- dto/       -> Data Transfer Objects
- common/    -> Shared interfaces and outcome variants

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Expected failures are returned as outcome values, never raised
"""
