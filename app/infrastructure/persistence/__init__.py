"""Persistence: database engine, ORM models, repositories, search."""
