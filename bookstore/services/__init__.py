"""
Services Package

Business logic kept apart from HTTP handling:
- catalog.py: author and book operations returning Result objects
- security.py: password hashing and JWT access tokens
- rate_limiter.py: slowapi limiter and its 429 handler
"""
