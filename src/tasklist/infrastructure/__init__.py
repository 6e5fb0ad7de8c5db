"""Infrastructure layer for Tasklist.

Contains the HTTP API, authentication primitives and persistence.
"""
