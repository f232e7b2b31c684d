from jetstream.catalog.core.models import (
    ASPECT_16_9, ASPECT_2_3, Movie, MovieDetails, CastMember, Review, Category,
)
from jetstream.catalog.core.repo import MovieRepository

__all__ = [
    "ASPECT_16_9", "ASPECT_2_3",
    "Movie", "MovieDetails", "CastMember", "Review", "Category",
    "MovieRepository",
]
