"""Domain layer — store items, link resolution, selection, and forest layout.

This layer depends only on stdlib and networkx.
It must never import from services, infrastructure, commands, or config.
"""
