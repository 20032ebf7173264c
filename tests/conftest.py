import logging
import random
from pathlib import Path

import pytest
from typing_sprint import ScoreStore, TextSelector, TypingSession

TEXTS = ("A map maps keys to values.", "A struct is a collection of fields.")


@pytest.fixture
def store(tmp_path: Path) -> ScoreStore:
    return ScoreStore(tmp_path / "scores.json")


@pytest.fixture
def session(store: ScoreStore) -> TypingSession:
    return TypingSession(
        TEXTS,
        store,
        selector=TextSelector(random.Random(42)),
        first_delay=0.01,
        next_delay=0.005,
    )


@pytest.fixture
def restore_logger():
    """configure_logging rewires the module logger; put it back afterwards."""
    logger = logging.getLogger("typing_sprint")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in logger.handlers:
        if handler not in saved[0]:
            handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
