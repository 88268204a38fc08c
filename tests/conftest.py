import logging

import pytest

from secure_random.core.logger import reset_logging
from secure_random.core.rng import SecureRandom
from tests.helpers import SeededEntropySource


@pytest.fixture
def seeded_rng():
    return SecureRandom(SeededEntropySource(seed=20240517))


@pytest.fixture
def system_rng():
    return SecureRandom()


@pytest.fixture
def captured_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="secure-random")
    return caplog


@pytest.fixture
def library_logging():
    """Undo any handlers a test installs through init_logging."""
    yield
    reset_logging()
