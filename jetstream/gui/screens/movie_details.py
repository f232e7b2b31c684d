from __future__ import annotations

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget,
)

from jetstream.settings import ICON, MOVIES_TOP_BAR_THRESHOLD
from jetstream.catalog.core.models import MovieDetails
from jetstream.gui.context import AppContext
from jetstream.gui.controller import (
    open_video_player, refresh_movie_details, similar_movies_title,
)
from jetstream.gui.movies_row import MoviesRow
from jetstream.gui.screens.base import ScrollingScreen
from jetstream.tvmaterial import ListItem


def _title_value(title: str, value: str) -> QWidget:
    box = QWidget()
    col = QVBoxLayout(box)
    col.setContentsMargins(0, 0, 0, 0)
    t = QLabel(title)
    t.setStyleSheet("font-size: 13px; color: #9aa0a6;")
    v = QLabel(value or "N/A")
    v.setStyleSheet("font-size: 16px;")
    col.addWidget(t)
    col.addWidget(v)
    return box


class MovieDetailsScreen(ScrollingScreen):
    """Header, cast & crew, similar movies, reviews and the facts row."""

    def __init__(self, ctx: AppContext, details: MovieDetails, parent: QWidget | None = None):
        super().__init__(MOVIES_TOP_BAR_THRESHOLD, parent)
        self.details = details

        # ── header ──────────────────────────────────────────────────────
        header = QWidget()
        hcol = QVBoxLayout(header)
        hcol.setContentsMargins(0, 0, 0, 0)
        self.name_label = QLabel(details.name)
        self.name_label.setStyleSheet("font-size: 34px; font-weight: bold;")
        hcol.addWidget(self.name_label)
        meta = " · ".join(p for p in (details.release_date[:4], details.director) if p)
        if meta:
            hcol.addWidget(QLabel(meta))
        desc = QLabel(details.description)
        desc.setWordWrap(True)
        desc.setMaximumWidth(720)
        hcol.addWidget(desc)
        self.watch_button = QPushButton(ICON("play"), "Watch Now")
        self.watch_button.setFixedWidth(180)
        self.watch_button.clicked.connect(lambda: open_video_player(ctx.nav))
        hcol.addWidget(self.watch_button)
        self.add_section(header)

        # ── cast & crew ─────────────────────────────────────────────────
        if details.cast_and_crew:
            cast = QWidget()
            crow = QHBoxLayout(cast)
            crow.setContentsMargins(0, 0, 0, 0)
            crow.setSpacing(12)
            for member in details.cast_and_crew:
                crow.addWidget(ListItem(member.real_name, supporting=member.character_name))
            crow.addStretch()
            self.add_section(QLabel("Cast & Crew"))
            self.add_section(cast)

        # ── similar ─────────────────────────────────────────────────────
        self.similar_row = MoviesRow(
            similar_movies_title(details.name), details.similar_movies, ctx.poster_loader,
            title_style="font-size: 16px; font-weight: 600;",
        )
        self.similar_row.movie_clicked.connect(lambda m: refresh_movie_details(ctx.nav, m.id))
        self.add_section(self.similar_row)

        # ── reviews ─────────────────────────────────────────────────────
        if details.reviews_and_ratings:
            reviews = QWidget()
            rrow = QHBoxLayout(reviews)
            rrow.setContentsMargins(0, 0, 0, 0)
            rrow.setSpacing(12)
            for review in details.reviews_and_ratings:
                rrow.addWidget(ListItem(
                    review.reviewer_name,
                    supporting=f"{review.review_count} reviews",
                    trailing=review.review_rating,
                ))
            rrow.addStretch()
            self.add_section(QLabel("Reviews and Ratings"))
            self.add_section(reviews)

        # ── divider + facts ─────────────────────────────────────────────
        divider = QFrame()
        divider.setFrameShape(QFrame.HLine)
        divider.setStyleSheet("color: rgba(227, 226, 230, 38);")
        self.add_section(divider)

        facts = QWidget()
        frow = QHBoxLayout(facts)
        frow.setContentsMargins(0, 0, 0, 0)
        for title, value in (
            ("Status", details.status),
            ("Original Language", details.original_language),
            ("Budget", details.budget),
            ("Revenue", details.revenue),
        ):
            frow.addWidget(_title_value(title, value), 1, Qt.AlignLeft)
        self.add_section(facts)
        self.finish()
