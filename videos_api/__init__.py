"""
Videos API Application Package

A GraphQL API over an in-memory list of videos, with Relay-style
global IDs, the Node interface and cursor-based connections.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- main.py: FastAPI application factory and configuration
- schemas/: Pydantic models of the stored entities
- services/: Video store, global IDs and connection pagination
- graphql/: Strawberry schemas, types and resolvers
"""

__version__ = "0.1.0"
