"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers (v1)
- Error handlers: Validation and unhandled-exception responses
- Dependencies: Dependency injection setup
"""
