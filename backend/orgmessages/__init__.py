"""Organization-scoped message CRUD service."""

__version__ = "1.0.0"
