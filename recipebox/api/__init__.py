"""
Recipebox REST API.

Provides a DRF ViewSet for Recipe (list, create, retrieve, update, destroy)
backed by the in-memory store.
"""
