"""
Test Suite for the BookStore API

Test Organization:
- conftest.py: Shared fixtures (test database, client, tokens, sample data)
- test_authors.py: /api/authors endpoints and the role guard
- test_books.py: /api/books endpoints
- test_users.py: /api/users register and login
- test_services.py: catalog services against in-memory repositories
- test_validation.py, test_middleware.py, test_client.py: helpers

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
