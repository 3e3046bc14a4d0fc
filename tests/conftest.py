"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from checkie.core.board import Board
from checkie.core.notation import board_from_diagram

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def start_board() -> Board:
    return Board.initial()


@pytest.fixture
def capture_board() -> Board:
    """Dark (AI) on d6 can step to c5 or jump e5 to f4; light keeps a spare man on a1."""
    return board_from_diagram(
        """
        ........
        ........
        ...d....
        ....l...
        ........
        ........
        ........
        l.......
        """
    )
