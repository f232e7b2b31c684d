from __future__ import annotations
from typing import Dict, List

from PySide6.QtCore    import Qt, Signal # type: ignore
from PySide6.QtWidgets import QGridLayout, QHBoxLayout, QLabel, QWidget # type: ignore

from jetstream.settings import FAVOURITES_TOP_BAR_THRESHOLD
from jetstream.catalog.core.models import Movie
from jetstream.catalog.filters import FAVOURITE_FILTERS, FilterRange
from jetstream.gui.context import AppContext
from jetstream.gui.controller import favourites_for_chips
from jetstream.gui.movie_card import MovieCard
from jetstream.gui.screens.base import ScrollingScreen
from jetstream.tvmaterial import FilterChip

GRID_COLUMNS = 5


class FavouritesScreen(ScrollingScreen):
    """Filter chips over a grid of favourite movies."""
    movie_clicked = Signal(object)

    def __init__(self, ctx: AppContext, parent: QWidget | None = None):
        super().__init__(FAVOURITES_TOP_BAR_THRESHOLD, parent)
        self._loader = ctx.poster_loader
        self.favourites: List[Movie] = ctx.repository.get_favourite_movies()
        self.selected: List[FilterRange] = []

        # ── chip row ─────────────────────────────────────────────────────
        chip_row = QWidget()
        chips = QHBoxLayout(chip_row)
        chips.setContentsMargins(0, 0, 0, 0)
        chips.setSpacing(12)
        self.chips: Dict[str, FilterChip] = {}
        for rng in FAVOURITE_FILTERS:
            chip = FilterChip(rng.name)
            chip.toggled.connect(lambda on, r=rng: self._on_chip_toggled(r, on))
            chips.addWidget(chip)
            self.chips[rng.name] = chip
        chips.addStretch()
        self.add_section(chip_row, header=True)

        # ── grid ────────────────────────────────────────────────────────
        self.grid_host = QWidget()
        self.grid = QGridLayout(self.grid_host)
        self.grid.setContentsMargins(0, 0, 0, 0)
        self.grid.setSpacing(20)
        self.add_section(self.grid_host)

        self.empty_label = QLabel("No favourites yet", alignment=Qt.AlignCenter)
        self.add_section(self.empty_label)
        self.finish()

        self._populate()

    def visible_movies(self) -> List[Movie]:
        return favourites_for_chips(self.favourites, self.selected)

    def select_filter(self, name: str, on: bool = True) -> None:
        """Programmatic chip toggle (keeps the chip widget in sync)."""
        chip = self.chips[name]
        if chip.isSelected() != on:
            chip.setSelected(on)
        rng = next(r for r in FAVOURITE_FILTERS if r.name == name)
        self._on_chip_toggled(rng, on)

    def _on_chip_toggled(self, rng: FilterRange, on: bool) -> None:
        if on and rng not in self.selected:
            self.selected.append(rng)
        elif not on and rng in self.selected:
            self.selected.remove(rng)
        self._populate()

    def _populate(self) -> None:
        while self.grid.count():
            item = self.grid.takeAt(0)
            if widget := item.widget():
                widget.deleteLater()

        movies = self.visible_movies()
        for idx, movie in enumerate(movies):
            card = MovieCard(movie, poster_loader=self._loader)
            card.clicked.connect(lambda m=movie: self.movie_clicked.emit(m))
            r, c = divmod(idx, GRID_COLUMNS)
            self.grid.addWidget(card, r, c, Qt.AlignLeft | Qt.AlignTop)
        self.empty_label.setVisible(not movies)
