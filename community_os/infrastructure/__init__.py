"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Prisma repositories and the in-memory store
- payments/: Stripe and offline payment gateways
- pdf/: ReportLab certificate renderer
- email/: SMTP email sender
"""
