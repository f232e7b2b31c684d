"""
catalog
~~~~~~~
Read-only movie catalog:

* core          – dataclasses + repository
* assets_reader – JSON asset access
* filters       – positional favourites filter ranges
"""

# ── core objects ──────────────────────────────────────────────────────────
from jetstream.catalog.core.models import Movie, MovieDetails, Category, CastMember, Review
from jetstream.catalog.core.repo   import MovieRepository
from jetstream.catalog.assets_reader import AssetsReader, CatalogLoadError

# ── favourites filter ────────────────────────────────────────────────────
from jetstream.catalog.filters import FilterRange, FAVOURITE_FILTERS, filter_by_ranges

__all__ = [
    "Movie",
    "MovieDetails",
    "Category",
    "CastMember",
    "Review",
    "MovieRepository",
    "AssetsReader",
    "CatalogLoadError",
    "FilterRange",
    "FAVOURITE_FILTERS",
    "filter_by_ranges",
]
