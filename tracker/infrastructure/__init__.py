"""
Infrastructure layer for the freelancer time tracker.

This layer contains the implementation details for external systems:
- Database (SQLAlchemy; SQLite by default)
- HTTP routers and middleware (FastAPI)

It implements the repository interfaces defined in the domain layer.
"""
