# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtGui     import QAction, QKeySequence # type: ignore
from PySide6.QtWidgets import QMainWindow, QWidget # type: ignore

from jetstream.settings import APP_TITLE, WINDOW_SIZE
from jetstream.gui.context import AppContext
from jetstream.gui.nav_host import NavHost


class MainWindow(QMainWindow):
    def __init__(self, ctx: AppContext, parent: QWidget | None = None):
        super().__init__(parent)
        self.ctx = ctx
        self.setWindowTitle(APP_TITLE)
        self.resize(*WINDOW_SIZE)

        # ── nav host -------------------------------------------------------
        self.host = NavHost(ctx)
        self.setCentralWidget(self.host)

        # ── back key -------------------------------------------------------
        back = QAction("Back", self)
        back.setShortcuts([QKeySequence("Esc"), QKeySequence("Backspace"), QKeySequence("Back")])
        back.setShortcutContext(Qt.ApplicationShortcut)
        back.triggered.connect(self.go_back)
        self.addAction(back)

    @Slot()
    def go_back(self) -> bool:
        """
        Screen first (dashboard hides/returns tabs), then the back stack.
        Closes the window when neither has anything left to undo.
        """
        screen = self.host.current_screen()
        handler = getattr(screen, "handle_back", None)
        if handler is not None and handler():
            return True
        if self.ctx.nav.navigate_up():
            return True
        self.close()
        return False

    def closeEvent(self, event) -> None:
        self.host.detach()
        if self.ctx.poster_loader is not None:
            self.ctx.poster_loader.shutdown()
        super().closeEvent(event)
