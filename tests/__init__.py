"""
Test Suite for Videos API

Test Organization:
- conftest.py: Shared fixtures (stores, app, client)
- test_global_id.py: Global ID encoding and node resolution
- test_pagination.py: Cursor-based connection pagination
- test_store.py: In-memory video store
- test_graphql.py: Relay GraphQL endpoint (/graphql)
- test_graphql_basic.py: Basic GraphQL endpoint (/graphql/basic)
- test_main.py: Health/root endpoints and configuration

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=videos_api --cov-report=html

    # Run specific file
    pytest tests/test_pagination.py
"""
