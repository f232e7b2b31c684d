from __future__ import annotations

from PySide6.QtCore    import Signal # type: ignore
from PySide6.QtWidgets import QWidget # type: ignore

from jetstream.settings import MOVIES_TOP_BAR_THRESHOLD
from jetstream.gui.context import AppContext
from jetstream.gui.movies_row import MoviesRow
from jetstream.gui.screens.base import ScrollingScreen


class HomeScreen(ScrollingScreen):
    """Featured, top-10, trending and popular rows."""
    movie_clicked = Signal(object)

    def __init__(self, ctx: AppContext, parent: QWidget | None = None):
        super().__init__(MOVIES_TOP_BAR_THRESHOLD, parent)
        repo = ctx.repository
        rows = [
            MoviesRow("Featured", repo.get_featured_movies(), ctx.poster_loader),
            MoviesRow("Top 10 Movies", repo.get_top_10_movies(), ctx.poster_loader),
            MoviesRow("Trending", repo.get_trending_movies(), ctx.poster_loader),
            MoviesRow("Popular Films This Week", repo.get_popular_films_this_week(), ctx.poster_loader),
        ]
        for row in rows:
            row.movie_clicked.connect(self.movie_clicked)
            self.add_section(row)
        self.finish()
