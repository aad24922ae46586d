"""Test configuration for the catalog persistence layer."""

from tests.fixtures import *  # noqa: F401,F403
