"""Domain layer — graph value types and comparators.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
