"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- errors/    → One closed error-code enum per feature
- dto/       → Data Transfer Objects returned to the presentation layer
- mappers/   → Entity → DTO conversion
- common/    → Shared interfaces (Command, Query base classes) and error translation

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, gateways and renderers
"""
