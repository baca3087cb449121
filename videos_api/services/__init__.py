"""
Services Package

This package contains logic that is independent of HTTP and GraphQL
handling and easy to test in isolation.

Current services:
- global_id.py: Global ID encoding/decoding and node resolution
- pagination.py: Cursor-based connection pagination
- store.py: In-memory video store
"""
