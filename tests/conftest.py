"""Test fixtures for module manifest validation.

This module provides:
- Factory fixtures that build valid entities with optional overrides, so a
  test only spells out the field it is breaking
- A log capture fixture for the modspec loggers
"""

import logging
from io import StringIO

import pytest

from modspec import DependencyDirection, Module, ModuleDependency, ModuleVersion


def _build_version(**overrides) -> ModuleVersion:
    fields = {"name": "v1.0.0"}
    fields.update(overrides)
    return ModuleVersion(**fields)


def _build_dependency(**overrides) -> ModuleDependency:
    fields = {
        "namespace": "com.example",
        "name": "library",
        "type": "go",
        "version": "v1.0.0",
        "direction": DependencyDirection.UPSTREAM,
    }
    fields.update(overrides)
    return ModuleDependency(**fields)


def _build_module(**overrides) -> Module:
    fields = {
        "namespace": "com.example",
        "name": "product",
        "type": "go",
        "version": _build_version(),
    }
    fields.update(overrides)
    return Module(**fields)


@pytest.fixture
def make_version():
    """Factory for a valid ModuleVersion; keyword arguments override fields."""
    return _build_version


@pytest.fixture
def make_dependency():
    """Factory for a valid upstream ModuleDependency."""
    return _build_dependency


@pytest.fixture
def make_module():
    """Factory for a valid Module with version v1.0.0 and no annotations or dependencies."""
    return _build_module


@pytest.fixture
def log_stream():
    """Capture DEBUG output of the modspec loggers."""
    logger = logging.getLogger("modspec")
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setLevel(logging.DEBUG)
    previous_level = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    yield stream
    logger.removeHandler(handler)
    logger.setLevel(previous_level)
