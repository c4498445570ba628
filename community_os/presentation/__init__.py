"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- schemas/: request bodies and query-parameter models
- dependencies/: bearer-token identity for the routes
- middleware.py: correlation id, request metrics and the auth gate
- rate_limit.py: slowapi limiter shared by the routers
"""
