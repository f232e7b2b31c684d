"""
gui.navigation
~~~~~~~~~~~~~~
Named routes, the back stack, and the "coming back from a different screen"
flag. No Qt here: `gui.nav_host` turns the top entry into a widget.

Route paths look like ``movieDetails/<movieId>``; arguments are strings and
an absent or empty argument is stored as ``None``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from itertools import count
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import quote, unquote

from jetstream.utils import log_debug

CATEGORY_ID_KEY = "categoryId"
MOVIE_ID_KEY    = "movieId"


class RouteNotFoundError(ValueError):
    """Path does not name a registered route."""


@dataclass(frozen=True)
class Route:
    name: str
    arg_names: Tuple[str, ...] = ()

    @property
    def pattern(self) -> str:
        return "/".join([self.name, *(f"{{{a}}}" for a in self.arg_names)])

    def __call__(self) -> str:
        return self.pattern

    def with_args(self, *args: str) -> str:
        """Concrete path for this route, e.g. ``movieDetails/8daa7d22``."""
        if len(args) != len(self.arg_names):
            raise ValueError(f"{self.name} expects {len(self.arg_names)} argument(s)")
        return "/".join([self.name, *(quote(str(a), safe="") for a in args)])


class Screens:
    DASHBOARD           = Route("dashboard")
    CATEGORY_MOVIE_LIST = Route("categoryMovieList", (CATEGORY_ID_KEY,))
    MOVIE_DETAILS       = Route("movieDetails", (MOVIE_ID_KEY,))
    VIDEO_PLAYER        = Route("videoPlayer")

    ALL: Tuple[Route, ...] = (DASHBOARD, CATEGORY_MOVIE_LIST, MOVIE_DETAILS, VIDEO_PLAYER)


def match_route(path: str, routes: Tuple[Route, ...] = Screens.ALL) -> Tuple[Route, Dict[str, Optional[str]]]:
    """Split *path* into its route and argument dict.

    Missing or empty arguments map to ``None``; the route still matches so
    the screen can show its own "invalid id" message.

    Raises
    ------
    RouteNotFoundError
        Unknown route name, or more segments than the route declares.
    """
    name, *segments = path.strip().strip("/").split("/")
    for route in routes:
        if route.name != name:
            continue
        if len(segments) > len(route.arg_names):
            raise RouteNotFoundError(f"Too many arguments for {route.name}: {path!r}")
        args: Dict[str, Optional[str]] = {}
        for i, key in enumerate(route.arg_names):
            value = unquote(segments[i]) if i < len(segments) else ""
            args[key] = value or None
        return route, args
    raise RouteNotFoundError(f"No route for {path!r}")


_entry_ids = count(1)


@dataclass(frozen=True)
class BackStackEntry:
    route: Route
    arguments: Dict[str, Optional[str]] = field(default_factory=dict)
    id: int = field(default_factory=lambda: next(_entry_ids))

    def argument(self, key: str) -> Optional[str]:
        return self.arguments.get(key)

    @property
    def path(self) -> str:
        if not self.route.arg_names:
            return self.route.name
        return self.route.with_args(*(self.arguments.get(k) or "" for k in self.route.arg_names))


@dataclass
class NavigationState:
    """
    Cross-screen UI state owned by one navigation controller.

    ``coming_back_from_different_screen`` is set by every successful pop and
    reset by the screen that reads it through `consume`.
    """
    coming_back_from_different_screen: bool = False

    def mark_returned(self) -> None:
        self.coming_back_from_different_screen = True

    def consume(self) -> bool:
        value = self.coming_back_from_different_screen
        self.coming_back_from_different_screen = False
        return value


Listener = Callable[[BackStackEntry], None]


class NavController:
    """Back stack of `BackStackEntry`; start destination is never popped."""

    def __init__(
        self,
        start_destination: str = Screens.DASHBOARD.pattern,
        state: NavigationState | None = None,
        routes: Tuple[Route, ...] = Screens.ALL,
    ) -> None:
        self.routes = routes
        self.state = state or NavigationState()
        self._listeners: List[Listener] = []
        route, args = match_route(start_destination, routes)
        self._stack: List[BackStackEntry] = [BackStackEntry(route, args)]

    # ───────────────────────────── queries ──────────────────────────
    @property
    def current(self) -> BackStackEntry:
        return self._stack[-1]

    @property
    def back_stack(self) -> List[BackStackEntry]:
        return list(self._stack)

    def can_navigate_up(self) -> bool:
        return len(self._stack) > 1

    # ───────────────────────────── listeners ────────────────────────
    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        entry = self.current
        for listener in list(self._listeners):
            listener(entry)

    # ───────────────────────────── moves ────────────────────────────
    def navigate(self, path: str, pop_up_to: Route | None = None, inclusive: bool = False) -> BackStackEntry:
        """Push *path*; optionally pop back to the last *pop_up_to* entry first.

        The start entry is kept even when ``inclusive`` would remove it.
        """
        route, args = match_route(path, self.routes)
        if pop_up_to is not None:
            self._pop_up_to(pop_up_to, inclusive)
        entry = BackStackEntry(route, args)
        self._stack.append(entry)
        log_debug(f"navigate → {entry.path} (depth {len(self._stack)})")
        self._notify()
        return entry

    def _pop_up_to(self, route: Route, inclusive: bool) -> None:
        for idx in range(len(self._stack) - 1, -1, -1):
            if self._stack[idx].route == route:
                keep = idx if inclusive else idx + 1
                del self._stack[max(keep, 1):]
                return

    def navigate_up(self) -> bool:
        """Pop the top entry. Returns False (and changes nothing) at the start entry."""
        if not self.can_navigate_up():
            return False
        popped = self._stack.pop()
        self.state.mark_returned()
        log_debug(f"navigate up ← {popped.path} (depth {len(self._stack)})")
        self._notify()
        return True
