"""Domain layer — the value type, calendar math, and parsing.

This layer depends only on stdlib and pydantic.
It must never import from services or config.
"""
