"""Worked examples of ORM relationship mappings between users and emails.

Each example under ``orm_relationships.entities`` maps the same two
entities in a different way and ships the SQL scripts that create and
populate its tables.
"""

__version__ = "0.1.0"
