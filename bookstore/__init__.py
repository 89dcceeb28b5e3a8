"""
BookStore API Application Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and get_db dependency
- main.py: FastAPI application factory
- dependencies.py: Dependency injection (sessions, services, role guard)
- middleware.py: ASGI path normalization for /api routes
- validation.py: FieldError and request checks beyond schema shape
- mappers.py: Entity <-> DTO conversion
- client.py: Endpoint table for the UI client
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: Persistence operations per model
- services/: Catalog operations, security, rate limiting
- routers/: API route handlers
"""

__version__ = "0.1.0"
