import json

import pytest

from jetstream.catalog import AssetsReader, CatalogLoadError, MovieRepository
from jetstream.catalog.core.models import ASPECT_16_9

BIG_BUCK_BUNNY = "8daa7d22d13a9"


def test_counts(repo):
    assert len(repo.get_all_movies()) == 32
    assert len(repo.get_favourite_movies()) == 32
    assert len(repo.get_popular_films_this_week()) == 8
    assert len(repo.get_featured_movies()) == 4
    assert len(repo.get_trending_movies()) == 6
    assert len(repo.get_top_10_movies()) == 10


def test_movies_16_9_only_wide_artwork(repo):
    wide = repo.get_movies_16_9()
    assert len(wide) == 14
    assert all(m.aspect == ASPECT_16_9 for m in wide)
    assert wide == [m for m in repo.get_all_movies() if m.is_16_9]


def test_favourites_keep_asset_order(repo):
    favourites = repo.get_favourite_movies()
    assert favourites[0].id == BIG_BUCK_BUNNY
    assert favourites[1].name == "Sintel"


def test_details_identity_matches_movie(repo):
    for movie in repo.get_all_movies():
        details = repo.get_movie_details(movie.id)
        assert details is not None
        assert details.id == movie.id
        assert details.name == movie.name
        assert details.description == movie.description
        assert details.poster_uri == movie.poster_uri
        assert details.video_uri == movie.video_uri


def test_details_content(repo):
    details = repo.get_movie_details(BIG_BUCK_BUNNY)
    assert [m.id for m in details.similar_movies] == [
        "537a1d69e5c8f", "0e7c3b2a6f114", "b3a71e9d05c26",
    ]
    assert len(details.cast_and_crew) == 3
    first = details.reviews_and_ratings[0]
    assert (first.reviewer_name, first.review_rating, first.review_count) == (
        "Rotten Tomatoes", "70%", "1000",
    )
    assert details.status == "Released"


def test_details_built_fresh_each_call(repo):
    a = repo.get_movie_details(BIG_BUCK_BUNNY)
    b = repo.get_movie_details(BIG_BUCK_BUNNY)
    assert a == b
    assert a is not b


def test_unknown_ids_return_none(repo):
    assert repo.get_movie("nope") is None
    assert repo.get_movie_details("nope") is None
    assert repo.get_movie_category_details("nope") is None


def test_categories(repo):
    categories = repo.get_movie_categories()
    assert [c.id for c in categories] == [
        "action", "adventure", "animation", "comedy", "documentary", "drama", "family", "scifi",
    ]
    animation = repo.get_movie_category_details("animation")
    assert animation.name == "Animation"
    assert len(animation.movies) == 10


# ── malformed assets ────────────────────────────────────────────────────────
def test_missing_asset_raises(assets_dir):
    (assets_dir / "movies.json").unlink()
    with pytest.raises(CatalogLoadError):
        MovieRepository(AssetsReader(assets_dir))


def test_invalid_json_raises(assets_dir):
    (assets_dir / "categories.json").write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        MovieRepository(AssetsReader(assets_dir))


def test_wrong_top_level_type_raises(assets_dir):
    (assets_dir / "movie_lists.json").write_text("[]", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        MovieRepository(AssetsReader(assets_dir))


def test_duplicate_movie_id_raises(assets_dir):
    path = assets_dir / "movies.json"
    rows = json.loads(path.read_text(encoding="utf-8"))
    rows.append(dict(rows[0]))
    path.write_text(json.dumps(rows), encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="Duplicate"):
        MovieRepository(AssetsReader(assets_dir))


def test_unknown_list_ids_are_skipped(assets_dir):
    path = assets_dir / "movie_lists.json"
    lists = json.loads(path.read_text(encoding="utf-8"))
    lists["featured"] = ["missing-id", BIG_BUCK_BUNNY]
    path.write_text(json.dumps(lists), encoding="utf-8")
    repo = MovieRepository(AssetsReader(assets_dir))
    assert [m.id for m in repo.get_featured_movies()] == [BIG_BUCK_BUNNY]
