"""
TaskIA API
==========

Layered REST backend for users, first-access authentication and projects.
"""
__version__ = "1.0.0"
