"""
Boundary layer for external system integrations.

Handles all interactions with external systems (vector index, model providers,
job queue, upload storage). Provides capability interfaces and their adapters.
"""
