"""Request validation schemas (pydantic), one module per feature area."""
