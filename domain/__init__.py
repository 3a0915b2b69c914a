"""
Domain package - enums, schemas and mappers for the lesson catalog.
"""
