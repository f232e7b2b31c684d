import sys

from PySide6.QtWidgets import QApplication, QMessageBox # type: ignore

from jetstream.settings import APP_TITLE, FETCH_POSTERS
from jetstream.utils    import apply_dark_palette, configure_logging, log_debug
from jetstream.catalog  import CatalogLoadError, MovieRepository
from jetstream.gui      import AppContext, MainWindow, NavController, PosterLoader


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    apply_dark_palette(app)

    # -------- catalog is loaded once, before any screen -----------------
    try:
        repository = MovieRepository()
    except CatalogLoadError as e:
        log_debug(f"catalog load failed: {e}")
        QMessageBox.critical(None, APP_TITLE, f"Could not load the movie catalog:\n{e}")
        sys.exit(1)

    posters = PosterLoader(enabled=FETCH_POSTERS)
    app.aboutToQuit.connect(posters.shutdown)

    ctx = AppContext(repository=repository, nav=NavController(), poster_loader=posters)
    window = MainWindow(ctx)
    window.show()
    log_debug("JetStream started")

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())


# Python entry-point guard
if __name__ == "__main__":
    main()
