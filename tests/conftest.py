"""Shared fixtures: a headless Qt application for widget tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def engine():
    from xo_board.game_logic import GameEngine

    return GameEngine()
