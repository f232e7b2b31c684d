"""
gui.nav_host
~~~~~~~~~~~~
Turns the `NavController` back stack into widgets. One widget per live
back-stack entry is kept in a QStackedWidget so returning to a screen
keeps its scroll position and selections; entries popped off the stack
have their widgets destroyed.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtWidgets import QLabel, QStackedWidget, QVBoxLayout, QWidget # type: ignore

from jetstream.gui.context import AppContext
from jetstream.gui.controller import INVALID_CATEGORY_ID, INVALID_MOVIE_ID
from jetstream.gui.navigation import (
    CATEGORY_ID_KEY, MOVIE_ID_KEY, BackStackEntry, Route, Screens,
)
from jetstream.gui.screens import (
    CategoryMovieListScreen, DashboardScreen, MovieDetailsScreen, VideoPlayerScreen,
)
from jetstream.utils import log_debug

ScreenFactory = Callable[[AppContext, BackStackEntry], QWidget]


def message_screen(text: str) -> QWidget:
    """Single centred label; shown for missing or unknown ids."""
    page = QWidget()
    label = QLabel(text, page, alignment=Qt.AlignCenter)
    label.setObjectName("MessageLabel")
    label.setStyleSheet("font-size: 22px;")
    lay = QVBoxLayout(page)
    lay.addWidget(label)
    return page


def _dashboard(ctx: AppContext, entry: BackStackEntry) -> QWidget:
    return DashboardScreen(ctx)


def _category_movie_list(ctx: AppContext, entry: BackStackEntry) -> QWidget:
    category_id = entry.argument(CATEGORY_ID_KEY)
    if category_id is None:
        return message_screen(INVALID_CATEGORY_ID)
    category = ctx.repository.get_movie_category_details(category_id)
    if category is None:
        log_debug(f"unknown category id {category_id!r}")
        return message_screen(INVALID_CATEGORY_ID)
    return CategoryMovieListScreen(ctx, category)


def _movie_details(ctx: AppContext, entry: BackStackEntry) -> QWidget:
    movie_id = entry.argument(MOVIE_ID_KEY)
    if movie_id is None:
        return message_screen(INVALID_MOVIE_ID)
    details = ctx.repository.get_movie_details(movie_id)
    if details is None:
        log_debug(f"unknown movie id {movie_id!r}")
        return message_screen(INVALID_MOVIE_ID)
    return MovieDetailsScreen(ctx, details)


def _video_player(ctx: AppContext, entry: BackStackEntry) -> QWidget:
    return VideoPlayerScreen(ctx)


DEFAULT_FACTORIES: Dict[Route, ScreenFactory] = {
    Screens.DASHBOARD:           _dashboard,
    Screens.CATEGORY_MOVIE_LIST: _category_movie_list,
    Screens.MOVIE_DETAILS:       _movie_details,
    Screens.VIDEO_PLAYER:        _video_player,
}


class NavHost(QStackedWidget):
    def __init__(
        self,
        ctx: AppContext,
        factories: Optional[Dict[Route, ScreenFactory]] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.ctx = ctx
        self.factories = dict(factories or DEFAULT_FACTORIES)
        self._pages: Dict[int, QWidget] = {}
        self._current_id: Optional[int] = None
        ctx.nav.add_listener(self._on_destination_changed)
        self._on_destination_changed(ctx.nav.current)

    def current_screen(self) -> Optional[QWidget]:
        return self.currentWidget()

    def page_for(self, entry_id: int) -> Optional[QWidget]:
        return self._pages.get(entry_id)

    def detach(self) -> None:
        self.ctx.nav.remove_listener(self._on_destination_changed)

    def _on_destination_changed(self, entry: BackStackEntry) -> None:
        previous = self._pages.get(self._current_id) if self._current_id is not None else None
        if previous is not None and hasattr(previous, "on_leave"):
            previous.on_leave()

        page = self._pages.get(entry.id)
        if page is None:
            page = self.factories[entry.route](self.ctx, entry)
            self._pages[entry.id] = page
            self.addWidget(page)

        live = {e.id for e in self.ctx.nav.back_stack}
        for stale_id in [i for i in self._pages if i not in live]:
            stale = self._pages.pop(stale_id)
            self.removeWidget(stale)
            stale.deleteLater()

        self._current_id = entry.id
        self.setCurrentWidget(page)
        if hasattr(page, "on_enter"):
            page.on_enter()
