"""Shared pytest fixtures for the catalog tests."""

from .core import *  # noqa: F401,F403
from .catalog import *  # noqa: F401,F403
