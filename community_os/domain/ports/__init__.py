"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Think of it as a contract:
- Domain says: "I need to save posts"
- Infrastructure implements: "I'll use PostgreSQL via Prisma" (or memory)

Subfolders:
- repositories/  → Data persistence interfaces
- services/      → Payment provider, certificate rendering, email
"""
