"""Service layer: business logic returning Result or Response.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
