"""catalog.core.repo
Read-only repository over the bundled catalog.

All asset parsing lives here; screens import this module instead of touching
JSON directly. The dataset is parsed once in ``__init__`` and never mutated.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple

from jetstream.settings import MOVIES_ASSET, CATEGORIES_ASSET, MOVIE_LISTS_ASSET
from jetstream.utils import log_debug
from jetstream.catalog.assets_reader import AssetsReader, CatalogLoadError
from jetstream.catalog.core.models import (
    ASPECT_2_3, Category, CastMember, Movie, MovieDetails, Review,
)

# keys of movie_lists.json
POPULAR_THIS_WEEK = "popularFilmsThisWeek"
FAVOURITES        = "favourites"
FEATURED          = "featured"
TRENDING          = "trending"
TOP_10            = "top10"


class MovieRepository:
    """Catalog queries over an in-memory dataset."""

    def __init__(self, reader: AssetsReader | None = None) -> None:
        self._reader = reader or AssetsReader()
        self._raw: Dict[str, Dict[str, Any]] = {}
        self._movies: Dict[str, Movie] = {}
        self._categories: List[Tuple[str, str, Tuple[str, ...]]] = []
        self._lists: Dict[str, Tuple[str, ...]] = {}
        self._load()

    # ───────────────────────────── loading ──────────────────────────
    def _load(self) -> None:
        for row in self._reader.read_list(MOVIES_ASSET):
            movie = _movie_from_row(row)
            if movie.id in self._movies:
                raise CatalogLoadError(f"Duplicate movie id: {movie.id}")
            self._movies[movie.id] = movie
            self._raw[movie.id] = row

        for row in self._reader.read_list(CATEGORIES_ASSET):
            try:
                cid, name = str(row["id"]), str(row["name"])
            except KeyError as e:
                raise CatalogLoadError(f"Category missing field {e}") from e
            self._categories.append((cid, name, tuple(map(str, row.get("movieIds", ())))))

        for key, ids in self._reader.read_mapping(MOVIE_LISTS_ASSET).items():
            if not isinstance(ids, list):
                raise CatalogLoadError(f"List {key!r} must be an array of ids")
            self._lists[key] = tuple(map(str, ids))

        log_debug(
            f"Catalog loaded: {len(self._movies)} movies, "
            f"{len(self._categories)} categories, {len(self._lists)} lists."
        )

    def _resolve(self, ids: Iterable[str], source: str) -> Tuple[Movie, ...]:
        """Map ids to movies, skipping (and logging) unknown ones."""
        out: List[Movie] = []
        for mid in ids:
            movie = self._movies.get(mid)
            if movie is None:
                log_debug(f"{source}: unknown movie id {mid!r} skipped")
                continue
            out.append(movie)
        return tuple(out)

    def _list(self, key: str) -> List[Movie]:
        return list(self._resolve(self._lists.get(key, ()), key))

    # ───────────────────────────── look-ups ──────────────────────────
    def get_movie(self, movie_id: str) -> Optional[Movie]:
        """Return the `Movie` for *movie_id* or **None** if not found."""
        return self._movies.get(movie_id)

    def get_all_movies(self) -> List[Movie]:
        return list(self._movies.values())

    def get_movies_16_9(self) -> List[Movie]:
        """Every movie whose artwork is tagged 16:9, in asset order."""
        return [m for m in self._movies.values() if m.is_16_9]

    def get_popular_films_this_week(self) -> List[Movie]:
        return self._list(POPULAR_THIS_WEEK)

    def get_favourite_movies(self) -> List[Movie]:
        return self._list(FAVOURITES)

    def get_featured_movies(self) -> List[Movie]:
        return self._list(FEATURED)

    def get_trending_movies(self) -> List[Movie]:
        return self._list(TRENDING)

    def get_top_10_movies(self) -> List[Movie]:
        return self._list(TOP_10)[:10]

    def get_movie_categories(self) -> List[Category]:
        return [
            Category(id=cid, name=name, movies=self._resolve(ids, f"category {cid}"))
            for cid, name, ids in self._categories
        ]

    def get_movie_category_details(self, category_id: str) -> Optional[Category]:
        """Return the `Category` for *category_id* or **None** if not found."""
        for cid, name, ids in self._categories:
            if cid == category_id:
                return Category(id=cid, name=name, movies=self._resolve(ids, f"category {cid}"))
        return None

    def get_movie_details(self, movie_id: str) -> Optional[MovieDetails]:
        """
        Build a `MovieDetails` for *movie_id*.

        A fresh object is built on every call; nothing is cached. Returns
        **None** for an unknown id.
        """
        movie = self._movies.get(movie_id)
        if movie is None:
            return None
        row = self._raw[movie_id]
        similar = tuple(
            m for m in self._resolve(map(str, row.get("similarMovieIds", ())), f"similar to {movie_id}")
            if m.id != movie_id
        )
        return MovieDetails(
            id=movie.id,
            name=movie.name,
            description=movie.description,
            poster_uri=movie.poster_uri,
            video_uri=movie.video_uri,
            status=row.get("status", "Released"),
            original_language=row.get("originalLanguage", ""),
            budget=row.get("budget", ""),
            revenue=row.get("revenue", ""),
            release_date=row.get("releaseDate", ""),
            director=row.get("director", ""),
            cast_and_crew=tuple(_cast_from_row(c) for c in row.get("castAndCrew", ())),
            reviews_and_ratings=tuple(_review_from_row(r) for r in row.get("reviewsAndRatings", ())),
            similar_movies=similar,
        )


# ───────────────────────── row → dataclass helpers ─────────────────────
def _movie_from_row(row: Dict[str, Any]) -> Movie:
    try:
        mid, name = str(row["id"]), str(row["name"])
    except KeyError as e:
        raise CatalogLoadError(f"Movie missing field {e}") from e
    if not mid:
        raise CatalogLoadError(f"Movie {name!r} has an empty id")
    return Movie(
        id=mid,
        name=name,
        description=row.get("description", ""),
        aspect=row.get("aspect", ASPECT_2_3),
        poster_uri=row.get("posterUri"),
        backdrop_uri=row.get("backdropUri"),
        video_uri=row.get("videoUri"),
    )


def _cast_from_row(row: Dict[str, Any]) -> CastMember:
    return CastMember(
        id=str(row.get("id", "")),
        real_name=row.get("realName", ""),
        character_name=row.get("characterName", ""),
        avatar_url=row.get("avatarUrl"),
    )


def _review_from_row(row: Dict[str, Any]) -> Review:
    return Review(
        reviewer_name=row.get("reviewerName", ""),
        reviewer_icon_uri=row.get("reviewerIconUri"),
        review_count=str(row.get("reviewCount", "")),
        review_rating=str(row.get("reviewRating", "")),
    )
