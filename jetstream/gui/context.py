from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from jetstream.catalog.core.repo import MovieRepository
from jetstream.gui.navigation import NavController, NavigationState

if TYPE_CHECKING:  # pragma: no cover
    from jetstream.gui.workers import PosterLoader


@dataclass
class AppContext:
    """Handed to every screen factory in place of process-wide globals."""

    repository: MovieRepository
    nav: NavController
    poster_loader: Optional["PosterLoader"] = None

    @property
    def nav_state(self) -> NavigationState:
        return self.nav.state
