from PySide6.QtCore    import QEvent, Qt # type: ignore
from PySide6.QtGui     import QFocusEvent # type: ignore
from PySide6.QtTest    import QTest # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from jetstream.settings import CARD_16_9_SIZE, CARD_2_3_SIZE
from jetstream.catalog.core.models import ASPECT_16_9, Movie
from jetstream.gui.movie_card import MovieCard
from jetstream.gui.movies_row import MoviesRow
from jetstream.tvmaterial import (
    DEFAULT_SCHEME, FilterChip, InteractionState as S, ListItem, ListItemDefaults,
)


def _focus_in(widget):
    QApplication.sendEvent(widget, QFocusEvent(QEvent.Type.FocusIn, Qt.TabFocusReason))


def _focus_out(widget):
    QApplication.sendEvent(widget, QFocusEvent(QEvent.Type.FocusOut, Qt.TabFocusReason))


def test_list_item_lines_and_height(qapp):
    item = ListItem("Action", overline="Genre", supporting="6 titles")
    assert item.headline() == "Action"
    assert item.overline_label.text() == "Genre"
    assert item.minimumHeight() == ListItemDefaults.MIN_CONTAINER_HEIGHT_THREE_LINE
    assert ListItem.min_container_height(False, 1) == 48
    assert ListItem.min_container_height(True, 1) == 56
    assert ListItem.min_container_height(True, 2) == 64


def test_focus_changes_state_and_colors(qapp):
    item = ListItem("Action")
    assert item.state() is S.DEFAULT
    _focus_in(item)
    assert item.state() is S.FOCUSED
    assert item.resolved_style().container_color == DEFAULT_SCHEME.inverse_surface
    assert item.resolved_style().content_color == DEFAULT_SCHEME.inverse_on_surface
    _focus_out(item)
    assert item.state() is S.DEFAULT


def test_disabled_and_focused_uses_emphasis_border(qapp):
    item = ListItem("Action")
    item.setEnabled(False)
    assert item.state() is S.DISABLED
    _focus_in(item)
    assert item.state() is S.FOCUSED_DISABLED
    assert item.resolved_style().border == ListItemDefaults.emphasis_border()


def test_movie_card_size_follows_aspect_and_scale(qapp):
    wide = MovieCard(Movie(id="w", name="Wide", aspect=ASPECT_16_9))
    tall = MovieCard(Movie(id="t", name="Tall"))
    assert (wide.width(), wide.height()) == CARD_16_9_SIZE
    assert (tall.width(), tall.height()) == CARD_2_3_SIZE

    _focus_in(wide)
    assert (wide.width(), wide.height()) == (281, 159)
    assert not wide.resolved_style().glow.is_none


def test_movie_card_click(qapp):
    card = MovieCard(Movie(id="w", name="Wide", aspect=ASPECT_16_9))
    card.show()
    clicks = []
    card.clicked.connect(lambda: clicks.append(card.movie.id))
    QTest.mouseClick(card, Qt.LeftButton)
    assert clicks == ["w"]
    card.close()


def test_filter_chip_toggles_on_activation(qapp):
    chip = FilterChip("TV Shows")
    chip.show()
    toggles = []
    chip.toggled.connect(toggles.append)
    QTest.keyClick(chip, Qt.Key_Return)
    assert chip.isSelected()
    QTest.keyClick(chip, Qt.Key_Space)
    assert not chip.isSelected()
    assert toggles == [True, False]
    chip.close()


def test_selected_chip_drops_outline(qapp):
    chip = FilterChip("Movies", selected=True)
    assert chip.state() is S.SELECTED
    assert chip.resolved_style().border.is_none
    assert chip.resolved_style().container_color == DEFAULT_SCHEME.secondary_container


def test_movies_row_forwards_clicks(qapp):
    movies = [Movie(id=str(i), name=f"Movie {i}") for i in range(3)]
    row = MoviesRow("Trending", movies)
    clicked = []
    row.movie_clicked.connect(clicked.append)
    row.cards[1].clicked.emit()
    assert clicked == [movies[1]]
    assert row.title_label.text() == "Trending"
