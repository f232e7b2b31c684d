"""
gui.screens
~~~~~~~~~~~
One module per navigation destination, plus the dashboard's four tabs.
"""

from jetstream.gui.screens.base import ScrollingScreen
from jetstream.gui.screens.home_screen import HomeScreen
from jetstream.gui.screens.categories_screen import CategoriesScreen
from jetstream.gui.screens.movies_screen import MoviesScreen
from jetstream.gui.screens.favourites_screen import FavouritesScreen
from jetstream.gui.screens.dashboard import DashboardScreen, DashboardTab
from jetstream.gui.screens.category_movie_list import CategoryMovieListScreen
from jetstream.gui.screens.movie_details import MovieDetailsScreen
from jetstream.gui.screens.video_player import VideoPlayerScreen

__all__ = [
    "ScrollingScreen",
    "HomeScreen", "CategoriesScreen", "MoviesScreen", "FavouritesScreen",
    "DashboardScreen", "DashboardTab",
    "CategoryMovieListScreen", "MovieDetailsScreen", "VideoPlayerScreen",
]
