"""Domain layer — positions, directions, rovers and plateaus.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
