"""
Database package: engine, session factory and table models.
"""
