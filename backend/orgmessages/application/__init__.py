"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- services/  → MessageService, the message use cases
- common/    → Result variants returned by the use cases
- dto/       → Data Transfer Objects for the HTTP layer

Rules:
- Depends on Domain layer only
- No HTTP/framework code here (DTOs are plain Pydantic models)
"""
