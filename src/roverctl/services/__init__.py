"""Service layer — parsing, simulation and result contracts.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
