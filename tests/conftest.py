from __future__ import annotations

from typing import Callable, Iterable

import pytest

from tictactoe import config


@pytest.fixture(scope="session", autouse=True)
def plain_output():
    # Escape codes make layout assertions unreadable; colour has its own tests.
    saved = config.USE_COLOR
    config.USE_COLOR = False
    yield
    config.USE_COLOR = saved


def scripted(lines: Iterable[str]) -> Callable[[], str]:
    """Stand-in for input(): replays lines, then behaves like a closed stdin."""
    it = iter(lines)

    def read_line() -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture
def script():
    return scripted
