from __future__ import annotations
from typing import Iterable, List

from jetstream.catalog.core.models import Movie
from jetstream.catalog.filters import FilterRange, filter_by_ranges
from jetstream.gui.navigation import NavController, Screens

INVALID_CATEGORY_ID = "Invalid category id"
INVALID_MOVIE_ID    = "Invalid movie id"


def is_top_bar_visible(first_visible_index: int, first_visible_offset: int, threshold: int) -> bool:
    """
    The dashboard top bar shows only while the first row is on screen and
    scrolled by less than *threshold* pixels.
    """
    return first_visible_index == 0 and first_visible_offset < threshold


def favourites_for_chips(favourites: List[Movie], selected: Iterable[FilterRange]) -> List[Movie]:
    """Favourites visible for the selected chips (positional ranges)."""
    return filter_by_ranges(favourites, selected)


def similar_movies_title(name: str) -> str:
    return f"Similar to {name}"


# ───────────────────────── navigation actions ─────────────────────────────
def open_category(nav: NavController, category_id: str) -> None:
    nav.navigate(Screens.CATEGORY_MOVIE_LIST.with_args(category_id))


def open_movie_details(nav: NavController, movie_id: str) -> None:
    nav.navigate(Screens.MOVIE_DETAILS.with_args(movie_id))


def refresh_movie_details(nav: NavController, movie_id: str) -> None:
    """Replace the current details entry instead of stacking a new one."""
    nav.navigate(
        Screens.MOVIE_DETAILS.with_args(movie_id),
        pop_up_to=Screens.MOVIE_DETAILS,
        inclusive=True,
    )


def open_video_player(nav: NavController) -> None:
    nav.navigate(Screens.VIDEO_PLAYER())


def first_visible_item(item_spans: List[tuple[int, int]], scroll_value: int) -> tuple[int, int]:
    """
    (index, offset) of the first item still on screen for a vertical list.

    *item_spans* are ``(top, height)`` pairs in content coordinates, in
    order; *offset* is how far that item has scrolled past the top edge.
    """
    for i, (top, height) in enumerate(item_spans):
        if top + height > scroll_value:
            return i, max(0, scroll_value - top)
    if not item_spans:
        return 0, scroll_value
    last_top, _ = item_spans[-1]
    return len(item_spans) - 1, max(0, scroll_value - last_top)
