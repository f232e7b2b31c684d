from __future__ import annotations

from PySide6.QtCore    import Signal # type: ignore
from PySide6.QtWidgets import QGridLayout, QWidget # type: ignore

from jetstream.settings import MOVIES_TOP_BAR_THRESHOLD
from jetstream.gui.context import AppContext
from jetstream.gui.screens.base import ScrollingScreen
from jetstream.tvmaterial import ListItem

GRID_COLUMNS = 4


class CategoriesScreen(ScrollingScreen):
    """Grid of category tiles; a click opens the category movie list."""
    category_clicked = Signal(str)

    def __init__(self, ctx: AppContext, parent: QWidget | None = None):
        super().__init__(MOVIES_TOP_BAR_THRESHOLD, parent)
        host = QWidget()
        grid = QGridLayout(host)
        grid.setSpacing(16)

        self.tiles: list[ListItem] = []
        for idx, category in enumerate(ctx.repository.get_movie_categories()):
            tile = ListItem(
                category.name,
                supporting=f"{len(category.movies)} titles",
            )
            tile.clicked.connect(lambda cid=category.id: self.category_clicked.emit(cid))
            r, c = divmod(idx, GRID_COLUMNS)
            grid.addWidget(tile, r, c)
            self.tiles.append(tile)

        self.add_section(host)
        self.finish()
