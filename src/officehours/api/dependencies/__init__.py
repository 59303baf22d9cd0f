"""
FastAPI dependencies for request processing.

Dependencies provide the shared services (settings, model manager) that are
injected into API endpoints and overridden in tests.
"""
