from jetstream.catalog import FAVOURITE_FILTERS, FilterRange, filter_by_ranges
from jetstream.catalog.filters import AVAILABLE_IN_4K, MOVIES, TV_SHOWS
from jetstream.gui.controller import favourites_for_chips


def test_chip_names():
    assert [r.name for r in FAVOURITE_FILTERS] == [
        "Movies", "TV Shows", "Added Last Week", "Available in 4K",
    ]


def test_tv_shows_is_positions_10_to_17():
    items = list(range(40))
    assert filter_by_ranges(items, [TV_SHOWS]) == list(range(10, 18))


def test_tv_shows_chip_on_favourites(repo):
    favourites = repo.get_favourite_movies()
    shown = favourites_for_chips(favourites, [TV_SHOWS])
    assert shown == favourites[10:18]


def test_empty_selection_shows_everything():
    assert filter_by_ranges("abc", []) == ["a", "b", "c"]


def test_overlapping_ranges_do_not_duplicate():
    wide = FilterRange("wide", 5, 12)
    assert filter_by_ranges(list(range(20)), [wide, TV_SHOWS, MOVIES]) == list(range(0, 18))


def test_positions_past_the_end_are_ignored():
    assert filter_by_ranges(list(range(26)), [AVAILABLE_IN_4K]) == [24, 25]


def test_range_membership_is_inclusive():
    assert 17 in TV_SHOWS
    assert 18 not in TV_SHOWS
    assert list(TV_SHOWS.indices()) == list(range(10, 18))
