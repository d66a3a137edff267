"""Errors, the generic repository and the database services."""
