"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- DTOs: Pydantic request/response models (request models carry the validation rules)
- Use Cases: Business operations (create user, login, create project, etc.)
- Services: Application services that coordinate use cases and return Results
"""
