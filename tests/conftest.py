"""Shared fixtures for the shapecheck test-suite."""
from __future__ import annotations

import logging

import pytest

from shapecheck import ValidationContext, get_settings


@pytest.fixture
def ctx() -> ValidationContext:
    """A fresh error context per test."""
    return ValidationContext()


@pytest.fixture
def fresh_settings():
    """Drop the cached settings before and after a test that edits the environment."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


@pytest.fixture
def restore_library_logger():
    """Put the ``shapecheck`` stdlib logger back the way the test found it."""
    lib_logger = logging.getLogger("shapecheck")
    saved = (list(lib_logger.handlers), lib_logger.level, lib_logger.propagate)
    yield lib_logger
    lib_logger.handlers = saved[0]
    lib_logger.setLevel(saved[1])
    lib_logger.propagate = saved[2]
