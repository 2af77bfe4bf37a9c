"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: MessageRepository implementations (in-memory, Prisma)
"""
