"""Domain layer: labels, TLD registry, ports, and the domain composite.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
