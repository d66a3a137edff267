"""Shared pytest fixtures for the database and CLI tests."""

from .core import *  # noqa: F401,F403
