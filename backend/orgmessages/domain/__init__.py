"""
DOMAIN LAYER - Messages and the rules that govern them

This layer contains:
- Entities: Business objects with identity (Message)
- Value Objects: Immutable types (MessageId, OrganizationId)
- Ports: Interfaces that infrastructure implements (MessageRepository)
- Services: Pure domain logic (message field validation)

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
