"""
Domain layer: entities, business rules and repository ports.
Nothing in here knows about HTTP or SQLAlchemy.
"""
