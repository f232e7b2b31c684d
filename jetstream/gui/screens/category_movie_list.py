from __future__ import annotations

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtWidgets import QGridLayout, QLabel, QWidget # type: ignore

from jetstream.settings import MOVIES_TOP_BAR_THRESHOLD
from jetstream.catalog.core.models import Category
from jetstream.gui.context import AppContext
from jetstream.gui.controller import open_movie_details
from jetstream.gui.movie_card import MovieCard
from jetstream.gui.screens.base import ScrollingScreen

GRID_COLUMNS = 5


class CategoryMovieListScreen(ScrollingScreen):
    """Category name over a grid of its movies."""

    def __init__(self, ctx: AppContext, category: Category, parent: QWidget | None = None):
        super().__init__(MOVIES_TOP_BAR_THRESHOLD, parent)
        self.category = category

        self.title_label = QLabel(category.name)
        self.title_label.setStyleSheet("font-size: 30px; font-weight: bold;")
        self.add_section(self.title_label)

        host = QWidget()
        grid = QGridLayout(host)
        grid.setSpacing(20)
        self.cards: list[MovieCard] = []
        for idx, movie in enumerate(category.movies):
            card = MovieCard(movie, poster_loader=ctx.poster_loader)
            card.clicked.connect(lambda mid=movie.id: open_movie_details(ctx.nav, mid))
            r, c = divmod(idx, GRID_COLUMNS)
            grid.addWidget(card, r, c, Qt.AlignLeft | Qt.AlignTop)
            self.cards.append(card)
        self.add_section(host)
        self.finish()
