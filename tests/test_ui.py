"""Board widget geometry and window wiring, run on the offscreen platform."""

import pytest
from PySide6.QtCore import QCoreApplication, QEvent, QPoint, QPointF, Qt
from PySide6.QtGui import QHelpEvent, QMouseEvent
from PySide6.QtTest import QTest

from xo_board.ui import board_widget as board_module
from xo_board.game_logic import GameEngine, Player
from xo_board.ui.board_widget import BoardWidget
from xo_board.ui.main_window import GameWindow


@pytest.fixture
def widget(qapp, engine):
    w = BoardWidget(engine)
    w.resize(300, 300)
    yield w
    w.deleteLater()


@pytest.fixture
def window(qapp):
    win = GameWindow(GameEngine())
    yield win
    win.close()
    win.deleteLater()


def click(window, *indexes):
    for index in indexes:
        window.board_widget.cell_clicked.emit(index)


@pytest.mark.parametrize("x, y, expected", [
    (10, 10, 0),
    (150, 10, 1),
    (290, 10, 2),
    (150, 150, 4),
    (10, 290, 6),
    (299, 299, 8),
])
def test_cell_index_at_square_widget(widget, x, y, expected):
    assert widget.cell_index_at(x, y) == expected


def test_points_outside_grid_map_to_none(widget):
    assert widget.cell_index_at(300, 10) is None
    assert widget.cell_index_at(-1, 10) is None
    widget.resize(400, 300)       # grid centered: 50px margin left and right
    assert widget.cell_index_at(40, 150) is None
    assert widget.cell_index_at(200, 150) == 4
    assert widget.cell_index_at(355, 150) is None


def test_cell_rect_round_trips(widget):
    for index in range(9):
        c = widget.cell_rect(index).center()
        assert widget.cell_index_at(c.x(), c.y()) == index


def test_widget_paints_every_phase(widget, engine):
    # smoke test: in progress, won, drawn
    assert not widget.grab().isNull()
    for index in [0, 3, 1, 4, 2]:
        engine.apply_move(index)
    assert not widget.grab().isNull()
    engine.reset()
    for index in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        engine.apply_move(index)
    assert engine.is_draw
    assert not widget.grab().isNull()


def test_window_starts_with_x_to_move(window):
    assert window.message_label.text() == "Player X's turn"
    assert window.board_widget.accepts_clicks()


def test_click_places_mark_and_updates_status(window):
    click(window, 4)
    assert window.engine.board[4] is Player.X
    assert window.message_label.text() == "Player O's turn"


def test_click_on_taken_cell_changes_nothing(window):
    click(window, 4, 4)
    assert window.engine.current_player is Player.O
    assert window.message_label.text() == "Player O's turn"


def test_win_locks_board(window):
    click(window, 0, 3, 1, 4, 2)
    assert window.message_label.text() == "Player X wins!"
    assert not window.board_widget.accepts_clicks()


def test_draw_message(window):
    click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert window.message_label.text() == "It's a draw!"
    assert not window.board_widget.accepts_clicks()


def test_reset_button_starts_new_game(window):
    click(window, 0, 3, 1, 4, 2)
    window.reset_button.click()
    assert window.engine.board == (None,) * 9
    assert window.message_label.text() == "Player X's turn"
    assert window.board_widget.accepts_clicks()


def test_closed_window_stops_following_engine(qapp):
    engine = GameEngine()
    win = GameWindow(engine)
    win.show()
    win.close()
    engine.apply_move(4)
    assert win.message_label.text() == "Player X's turn"
    win.deleteLater()


def test_deleted_window_is_not_called_back(qapp):
    engine = GameEngine()
    win = GameWindow(engine)
    win.deleteLater()
    QCoreApplication.sendPostedEvents(None, QEvent.DeferredDelete)
    assert engine.apply_move(4) is True
    assert engine.board[4] is Player.X


# --- real mouse input on a shown board ---

def show_board(widget, engine, width=300, height=300):
    # size first, a shown top-level resizes asynchronously
    clicked = []
    widget.cell_clicked.connect(clicked.append)
    widget.cell_clicked.connect(engine.apply_move)
    widget.resize(width, height)
    widget.show()
    QTest.qWaitForWindowExposed(widget)
    widget.clicked = clicked
    return widget


@pytest.fixture
def shown(widget, engine):
    return show_board(widget, engine)


def center_of(widget, index):
    return widget.cell_rect(index).center().toPoint()


def hover(widget, point):
    event = QMouseEvent(QEvent.MouseMove, QPointF(point), QPointF(widget.mapToGlobal(point)),
                        Qt.NoButton, Qt.NoButton, Qt.NoModifier)
    QCoreApplication.sendEvent(widget, event)


def test_click_at_cell_center_places_mark(shown, engine):
    QTest.mouseClick(shown, Qt.LeftButton, Qt.NoModifier, center_of(shown, 4))
    assert shown.clicked == [4]
    assert engine.board[4] is Player.X


def test_click_outside_grid_is_ignored(widget, engine):
    shown = show_board(widget, engine, 400, 300)
    QTest.mouseClick(shown, Qt.LeftButton, Qt.NoModifier, QPoint(10, 150))
    assert shown.clicked == []
    assert engine.board == (None,) * 9


def test_click_ignored_when_input_disabled(shown, engine):
    shown.set_accept_clicks(False)
    QTest.mouseClick(shown, Qt.LeftButton, Qt.NoModifier, center_of(shown, 0))
    assert shown.clicked == []
    assert engine.board[0] is None


def test_click_ignored_after_win(shown, engine):
    for index in [0, 3, 1, 4, 2]:
        engine.apply_move(index)
    QTest.mouseClick(shown, Qt.LeftButton, Qt.NoModifier, center_of(shown, 8))
    assert shown.clicked == []
    assert engine.board[8] is None


def test_hover_sets_accessible_description(shown, engine):
    engine.apply_move(4)
    hover(shown, center_of(shown, 4))
    assert shown.accessibleDescription() == "Row 2, Column 2, X"
    hover(shown, center_of(shown, 2))
    assert shown.accessibleDescription() == "Row 1, Column 3, empty"


def test_hover_outside_grid_clears_description(widget):
    widget.resize(400, 300)
    hover(widget, center_of(widget, 0))
    assert widget.accessibleDescription() == "Row 1, Column 1, empty"
    hover(widget, QPoint(10, 150))
    assert widget.accessibleDescription() == ""


class _TipRecorder:
    def __init__(self):
        self.shown = []
        self.hidden = 0

    def showText(self, pos, text, widget=None):
        self.shown.append(text)

    def hideText(self):
        self.hidden += 1


def test_tooltip_shows_cell_label(widget, engine, monkeypatch):
    tips = _TipRecorder()
    monkeypatch.setattr(board_module, "QToolTip", tips)
    engine.apply_move(0)
    pos = center_of(widget, 0)
    handled = widget.event(QHelpEvent(QEvent.ToolTip, pos, widget.mapToGlobal(pos)))
    assert handled is True
    assert tips.shown == ["Row 1, Column 1, X"]


def test_tooltip_hidden_outside_grid(widget, monkeypatch):
    tips = _TipRecorder()
    monkeypatch.setattr(board_module, "QToolTip", tips)
    widget.resize(400, 300)
    pos = QPoint(10, 150)
    widget.event(QHelpEvent(QEvent.ToolTip, pos, widget.mapToGlobal(pos)))
    assert tips.shown == []
    assert tips.hidden == 1
