"""Infrastructure layer — graph documents, file loaders, networkx bridge.

This layer depends on stdlib, the domain layer and third-party libs
(pydantic, ruamel.yaml, NetworkX).
It must never import from services, commands, or output.
"""
