"""Pytest configuration for ray caster tests.

Provides shared scene fixtures and keeps the root logger clean between
tests that call setup_logging().
"""

import logging

import pytest

from core.vector import Point3
from geometry.sphere import Sphere
from geometry.world import HittableList


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Restore root logger handlers and level after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def two_sphere_world():
    """Small sphere at (0, 0, -1) resting on a large ground sphere."""
    return HittableList([
        Sphere(Point3(0, 0, -1), 0.5),
        Sphere(Point3(0, -100.5, -1), 100),
    ])


@pytest.fixture
def empty_world():
    """World with no surfaces."""
    return HittableList()
