"""Typed query helpers operating on an explicit SQLAlchemy session."""
