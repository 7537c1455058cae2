"""
DOMAIN LAYER - Members, conversations and messages

This layer contains:
- Entities: Business objects with identity (Conversation, Message, Profile)
- Value Objects: Immutable types (UserId, ConversationId, ContentLimit)
- Ports: Interfaces/abstractions that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
