"""Database Metadata — SQLAlchemy declarative Base shared by every ORM model.

Design Decisions:
    - Engine and sessions live in infrastructure/database.py; this package holds only metadata
"""
