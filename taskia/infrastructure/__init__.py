"""
Infrastructure Layer
====================

Concrete implementations of the domain repository and unit-of-work
interfaces backed by MongoDB (pymongo).
"""
