from __future__ import annotations
from enum import Enum
from typing import Dict

from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QHBoxLayout, QLabel, QStackedWidget, QVBoxLayout, QWidget,
)

from jetstream.settings import APP_TITLE, ACCENT_COLOR
from jetstream.gui.context import AppContext
from jetstream.gui.controller import open_category, open_movie_details
from jetstream.gui.screens.base import ScrollingScreen
from jetstream.gui.screens.categories_screen import CategoriesScreen
from jetstream.gui.screens.favourites_screen import FavouritesScreen
from jetstream.gui.screens.home_screen import HomeScreen
from jetstream.gui.screens.movies_screen import MoviesScreen
from jetstream.tvmaterial import FilterChip


class DashboardTab(str, Enum):
    HOME       = "Home"
    CATEGORIES = "Categories"
    MOVIES     = "Movies"
    FAVOURITES = "Favourites"


class DashboardScreen(QWidget):
    """
    Top bar of tabs over the tab screens.

    The top bar hides while the active tab is scrolled; forcing it back
    scrolls that tab to its first row.
    """

    def __init__(self, ctx: AppContext, parent: QWidget | None = None):
        super().__init__(parent)
        self.ctx = ctx

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        # ── top bar ─────────────────────────────────────────────────────
        self.top_bar = QWidget()
        bar = QHBoxLayout(self.top_bar)
        bar.setContentsMargins(48, 16, 48, 8)
        bar.setSpacing(12)
        self.tab_buttons: Dict[DashboardTab, FilterChip] = {}
        for tab in DashboardTab:
            btn = FilterChip(tab.value)
            btn.clicked.connect(lambda t=tab: self.select_tab(t))
            bar.addWidget(btn)
            self.tab_buttons[tab] = btn
        bar.addStretch()
        logo = QLabel(APP_TITLE)
        logo.setStyleSheet(f"color:{ACCENT_COLOR}; font-size:22px; font-weight:bold;")
        bar.addWidget(logo, 0, Qt.AlignRight)
        root.addWidget(self.top_bar)

        # ── tab pages ───────────────────────────────────────────────────
        self.pages = QStackedWidget()
        home       = HomeScreen(ctx)
        categories = CategoriesScreen(ctx)
        movies     = MoviesScreen(ctx)
        favourites = FavouritesScreen(ctx)
        self.tab_pages: Dict[DashboardTab, ScrollingScreen] = {
            DashboardTab.HOME: home,
            DashboardTab.CATEGORIES: categories,
            DashboardTab.MOVIES: movies,
            DashboardTab.FAVOURITES: favourites,
        }
        for page in self.tab_pages.values():
            self.pages.addWidget(page)
            page.top_bar_visibility_changed.connect(self._on_top_bar_visibility)
        root.addWidget(self.pages, 1)

        for page in (home, movies, favourites):
            page.movie_clicked.connect(lambda m: open_movie_details(ctx.nav, m.id))
        categories.category_clicked.connect(lambda cid: open_category(ctx.nav, cid))

        self.current_tab = DashboardTab.HOME
        self.select_tab(DashboardTab.HOME)

    # ------------------------------------------------------------------ API
    def select_tab(self, tab: DashboardTab) -> None:
        self.current_tab = tab
        for t, btn in self.tab_buttons.items():
            btn.setSelected(t == tab)
        page = self.tab_pages[tab]
        self.pages.setCurrentWidget(page)
        self.top_bar.setVisible(page.is_top_bar_visible())

    def current_page(self) -> ScrollingScreen:
        return self.tab_pages[self.current_tab]

    def is_top_bar_visible(self) -> bool:
        return not self.top_bar.isHidden()

    def show_top_bar(self) -> None:
        """Bring the top bar back and return the active tab to its first row."""
        self.top_bar.setVisible(True)
        self.current_page().scroll_to_top()

    def on_enter(self) -> None:
        """
        Called by the nav host whenever the dashboard becomes the top entry.

        Coming back from another screen keeps the tab and scroll position;
        anything else starts from the top of Home.
        """
        if self.ctx.nav_state.consume():
            return
        self.select_tab(DashboardTab.HOME)
        self.current_page().scroll_to_top(animated=False)
        self.top_bar.setVisible(True)

    def handle_back(self) -> bool:
        """Back key: show the top bar, then go Home; False lets the app exit."""
        if not self.is_top_bar_visible():
            self.show_top_bar()
            return True
        if self.current_tab is not DashboardTab.HOME:
            self.select_tab(DashboardTab.HOME)
            return True
        return False

    # ---------------------------------------------------------------- slots
    @Slot(bool)
    def _on_top_bar_visibility(self, visible: bool) -> None:
        if self.sender() is not self.current_page():
            return
        if visible:
            self.show_top_bar()
        else:
            self.top_bar.setVisible(False)
