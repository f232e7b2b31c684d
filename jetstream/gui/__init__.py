"""
gui
~~~
All Qt widgets, screens and navigation.

•  No asset reading here – everything goes through `catalog.MovieRepository`.
•  `navigation` and `controller` import no Qt widgets and can be tested
   without a display.
"""

# ── navigation / controllers ─────────────────────────────────────────────
from jetstream.gui.navigation import NavController, NavigationState, Screens, match_route
from jetstream.gui.context import AppContext

# ── widgets / pages ──────────────────────────────────────────────────────
from jetstream.gui.workers import PosterLoader
from jetstream.gui.nav_host import NavHost
from jetstream.gui.main_window import MainWindow

__all__ = [
    "NavController", "NavigationState", "Screens", "match_route",
    "AppContext", "PosterLoader", "NavHost", "MainWindow",
]
