"""Service layer — drives the work queue and returns ServiceResult.

Services may import from the domain and plugins layers.
They must never import from commands or output.
"""
