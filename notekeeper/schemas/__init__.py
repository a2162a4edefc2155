"""
Schemas.

Pydantic read models for the presentation layer.
"""
