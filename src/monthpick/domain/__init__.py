"""Domain layer — year-month values, vocabularies, format patterns.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
