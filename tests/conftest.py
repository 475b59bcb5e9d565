"""Test configuration: load the shared fixtures."""

from tests.fixtures import *  # noqa: F401,F403
