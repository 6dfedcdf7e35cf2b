"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Entities: Domain models representing business concepts
- Result: Uniform outcome envelope returned by application services
- Repository Interfaces: Abstract contracts for data access and unit of work
"""
