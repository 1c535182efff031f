"""
Shared infrastructure: security helpers, middleware and dependencies.
"""
