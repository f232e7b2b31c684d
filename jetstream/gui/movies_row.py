from __future__ import annotations
from typing import List, Sequence

from PySide6.QtCore    import Qt, Signal # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget,
)

from jetstream.catalog.core.models import Movie
from jetstream.gui.movie_card import MovieCard


class MoviesRow(QWidget):
    """Titled, horizontally scrolling row of movie cards."""
    movie_clicked = Signal(object)           # Movie

    def __init__(
        self,
        title: str | None,
        movies: Sequence[Movie],
        poster_loader=None,
        title_style: str = "font-size: 18px; font-weight: 600;",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.title_label = None
        if title:
            self.title_label = QLabel(title)
            self.title_label.setStyleSheet(title_style)
            root.addWidget(self.title_label)

        scroll = QScrollArea()
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        strip = QWidget()
        row = QHBoxLayout(strip)
        row.setContentsMargins(8, 12, 8, 12)
        row.setSpacing(20)

        self.cards: List[MovieCard] = []
        for movie in movies:
            card = MovieCard(movie, poster_loader=poster_loader)
            card.clicked.connect(lambda m=movie: self.movie_clicked.emit(m))
            row.addWidget(card, 0, Qt.AlignVCenter)
            self.cards.append(card)
        row.addStretch()

        scroll.setWidget(strip)
        tallest = max((c.height() for c in self.cards), default=0)
        scroll.setMinimumHeight(tallest + 40)
        root.addWidget(scroll)
