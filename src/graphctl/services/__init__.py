"""Service layer — graph operations returning ServiceResult.

Services may import from domain, algorithms, and infrastructure layers.
They must never import from commands or output.
"""
