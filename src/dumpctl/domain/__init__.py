"""Domain layer — field contracts, resolution, expansion, and help text.

This layer depends only on the stdlib.
It must never import from services, commands, config, or output.
"""
