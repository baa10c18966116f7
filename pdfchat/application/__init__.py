"""
Application layer.

Service orchestrators that sit between the HTTP API and the core pipelines.
"""
