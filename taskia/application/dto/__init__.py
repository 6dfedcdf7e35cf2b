"""
DTO Package
===========

Request models double as the validation layer: their pydantic constraints
run before any service is called.
"""
