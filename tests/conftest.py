"""Pytest configuration and shared fixtures for nlcgbeta tests.

This module provides:
- A deterministic NumPy RNG fixture
- Global numpy/torch seeding for every test
- A helper fixture capturing nlcgbeta log output
"""

import logging
import os
from io import StringIO

import numpy as np
import pytest
import torch

from nlcgbeta.logging import configure_logging


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy and torch global generators before each test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture
def log_stream():
    """Route all nlcgbeta loggers to an in-memory stream at DEBUG level."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        yield stream
    finally:
        configure_logging(level=logging.WARNING)
