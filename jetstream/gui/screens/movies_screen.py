from __future__ import annotations

from PySide6.QtCore    import Signal # type: ignore
from PySide6.QtWidgets import QWidget # type: ignore

from jetstream.settings import MOVIES_TOP_BAR_THRESHOLD
from jetstream.gui.context import AppContext
from jetstream.gui.movies_row import MoviesRow
from jetstream.gui.screens.base import ScrollingScreen

POPULAR_FILMS_THIS_WEEK_TITLE = "Popular Films This Week"


class MoviesScreen(ScrollingScreen):
    """16:9 showcase row followed by this week's popular films."""
    movie_clicked = Signal(object)

    def __init__(self, ctx: AppContext, parent: QWidget | None = None):
        super().__init__(MOVIES_TOP_BAR_THRESHOLD, parent)
        repo = ctx.repository

        self.movies_16_9 = MoviesRow(None, repo.get_movies_16_9(), ctx.poster_loader)
        self.popular = MoviesRow(
            POPULAR_FILMS_THIS_WEEK_TITLE, repo.get_popular_films_this_week(), ctx.poster_loader,
        )
        for row in (self.movies_16_9, self.popular):
            row.movie_clicked.connect(self.movie_clicked)
            self.add_section(row)
        self.finish()
