"""Infrastructure layer — in-memory graph store, workspace file, networkx interop.

This layer depends on the domain layer, stdlib, and third-party libs (NetworkX).
It must never import from algorithms, services, commands, or output.
"""
