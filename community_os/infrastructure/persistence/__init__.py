"""
Persistence Layer - Database implementations.

- prisma_*: Prisma (Postgres) repositories for the domain ports
- memory: in-process repositories for tests and local runs

Modules are imported directly rather than re-exported here so that the
memory backend never needs a generated Prisma client.
"""
