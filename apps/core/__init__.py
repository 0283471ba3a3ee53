"""
Core app - Shared abstractions and utilities.

This app provides the pieces every other app leans on:
- The error taxonomy and its HTTP mapping (exceptions, handlers)
- Translation of database failures into that taxonomy (db)
- The `runserver` command that listens on the configured PORT
"""
