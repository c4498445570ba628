"""
DOMAIN LAYER - Community OS business model

This layer contains:
- Entities: Communities, members, forum content, courses, payments, notifications
- Value Objects: Immutable types (Email, HexColor, Role)
- Ports: Interfaces that infrastructure implements (repositories, gateways)
- Services: Pure domain helpers (rich-text handling, mentions)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
