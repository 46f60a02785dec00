"""Domain layer — code tables, identifier grammars, and record shapes.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
