# Catalog dataclasses (immutable after load)
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

ASPECT_16_9 = "16:9"
ASPECT_2_3  = "2:3"


@dataclass(frozen=True, slots=True)
class Movie:
    id: str
    name: str
    description: str = ""
    aspect: str = ASPECT_2_3
    poster_uri: str | None = None
    backdrop_uri: str | None = None
    video_uri: str | None = None

    @property
    def is_16_9(self) -> bool:
        return self.aspect == ASPECT_16_9


@dataclass(frozen=True, slots=True)
class CastMember:
    id: str
    real_name: str
    character_name: str
    avatar_url: str | None = None


@dataclass(frozen=True, slots=True)
class Review:
    reviewer_name: str
    reviewer_icon_uri: str | None
    review_count: str
    review_rating: str


@dataclass(frozen=True, slots=True)
class MovieDetails:
    id: str
    name: str
    description: str
    poster_uri: str | None
    video_uri: str | None
    status: str
    original_language: str
    budget: str
    revenue: str
    release_date: str = ""
    director: str = ""
    cast_and_crew: Tuple[CastMember, ...] = ()
    reviews_and_ratings: Tuple[Review, ...] = ()
    similar_movies: Tuple[Movie, ...] = ()


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str
    movies: Tuple[Movie, ...] = field(default=())
