"""Data access layer: engine, ORM models and query helpers."""
