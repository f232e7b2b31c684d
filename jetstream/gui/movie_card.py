from __future__ import annotations
from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget # type: ignore

from jetstream.settings import CARD_16_9_SIZE, CARD_2_3_SIZE
from jetstream.utils    import elide
from jetstream.catalog.core.models import Movie
from jetstream.tvmaterial import (
    Border, DEFAULT_SCHEME, Glow, ListItemDefaults, ListItemStyle, RoundedCornerShape,
)
from jetstream.tvmaterial.surface import StyledSurface


def movie_card_style() -> ListItemStyle:
    """Poster card: white focus border, soft primary glow, slight zoom."""
    shape = RoundedCornerShape(12)
    focus_border = Border(width=3, color=DEFAULT_SCHEME.on_surface, radius=shape.radius)
    return ListItemDefaults.style(
        shape=ListItemDefaults.shape(shape=shape),
        colors=ListItemDefaults.colors(
            container_color=DEFAULT_SCHEME.surface_variant,
            focused_container_color=DEFAULT_SCHEME.surface_variant,
            content_color=DEFAULT_SCHEME.on_surface_variant,
        ),
        border=ListItemDefaults.border(focused_border=focus_border),
        glow=ListItemDefaults.glow(focused_glow=Glow(DEFAULT_SCHEME.primary, 8)),
        scale=ListItemDefaults.scale(focused_scale=1.05),
    )


class MovieCard(StyledSurface):
    """Poster (or title placeholder) for one movie; size follows the aspect tag."""

    def __init__(self, movie: Movie, parent: QWidget | None = None, poster_loader=None):
        size = CARD_16_9_SIZE if movie.is_16_9 else CARD_2_3_SIZE
        super().__init__(
            style=movie_card_style(), base_size=size, object_name="MovieCard", parent=parent,
        )
        self.movie = movie
        self.setToolTip(movie.name)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        # ── poster / placeholder ─────────────────────────────────────────
        self.poster = QLabel(elide(movie.name), alignment=Qt.AlignCenter)
        self.poster.setWordWrap(True)
        self.poster.setScaledContents(True)
        root.addWidget(self.poster)

        if poster_loader is not None:
            poster_loader.request(movie.poster_uri, self)

    def title(self) -> str:
        return self.movie.name

    def set_poster(self, pixmap: QPixmap) -> None:
        self.poster.setPixmap(pixmap)
