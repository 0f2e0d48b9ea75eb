import logging
from pathlib import Path

import pytest

from fdkeys.elements.dependency_set import DependencySet
from fdkeys.logger import key_logger

DATA_DIR = Path(__file__).parent / "data"

# A..I
A, B, C, D, E, F, G, H, I = range(9)


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Enable the key search trace
    key_logger.disabled = False


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def reference_deps() -> DependencySet:
    """The nine-attribute reference dataset (see data/reference.fd)."""
    return DependencySet(
        9,
        [
            ((A,), (B, C)),
            ((B,), (D, E)),
            ((C,), (F, G)),
            ((D, G), (H,)),
            ((E, F), (I,)),
            ((H, I), (A,)),
        ],
    )


@pytest.fixture
def cycle_deps() -> DependencySet:
    return DependencySet(3, [((0,), (1,)), ((1,), (2,)), ((2,), (0,))])
