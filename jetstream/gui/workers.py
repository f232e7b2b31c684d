from __future__ import annotations
from typing import Dict, List

import requests
from PySide6.QtCore    import QObject, QThread, Signal, Slot # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from shiboken6 import isValid

from jetstream.settings import FETCH_POSTERS, POSTER_TIMEOUT_S
from jetstream.utils import log_debug, throttle


@throttle(min_delay=0.05, jitter=0.05)
def fetch_image_bytes(url: str, timeout: float = POSTER_TIMEOUT_S) -> bytes:
    """GET *url* and return the body; raises `requests.RequestException`."""
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.content


# ───────────────────────── Worker skeleton ───────────────────────────────
class _PosterWorker(QObject):
    loaded   = Signal(str, object)       # url, raw bytes
    failed   = Signal(str)
    finished = Signal(bool)

    def __init__(self, urls: List[str]):
        super().__init__()
        self.urls = urls
        self.abort = False

    @Slot()
    def run(self):
        ok = True
        for url in self.urls:
            if self.abort:
                break
            try:
                self.loaded.emit(url, fetch_image_bytes(url))
            except requests.RequestException as e:
                log_debug(f"poster-worker error for {url}: {e}")
                self.failed.emit(url)
                ok = False
        self.finished.emit(ok)


# ───────────────────────── Loader used by widgets ────────────────────────
class PosterLoader(QObject):
    """
    Loads poster images off the UI thread, one batch at a time.

    Receivers are widgets with a ``set_poster(QPixmap)`` method; a receiver
    deleted before its image arrives is skipped. Pixmaps are cached by URL for
    the lifetime of the loader.
    """

    def __init__(self, enabled: bool = FETCH_POSTERS, parent: QObject | None = None):
        super().__init__(parent)
        self.enabled = enabled
        self._cache: Dict[str, QPixmap] = {}
        self._waiting: Dict[str, List[QObject]] = {}
        self._queued: List[str] = []
        self._thread: QThread | None = None
        self._worker: _PosterWorker | None = None

    def cached(self, url: str) -> QPixmap | None:
        return self._cache.get(url)

    def request(self, url: str | None, receiver: QObject) -> None:
        if not url or not self.enabled:
            return
        if (pix := self._cache.get(url)) is not None:
            receiver.set_poster(pix)
            return
        first = url not in self._waiting
        self._waiting.setdefault(url, []).append(receiver)
        if first:
            self._queued.append(url)
            self._start_next()

    def shutdown(self) -> None:
        """Stop after the current download and wait for the thread."""
        self._queued.clear()
        if self._worker is not None:
            self._worker.abort = True
        if self._thread is not None:
            self._thread.quit()
            self._thread.wait()

    # ---------------------------------------------------------------- misc
    def _start_next(self) -> None:
        if self._thread is not None or not self._queued:
            return
        urls, self._queued = self._queued, []
        thr    = QThread()
        worker = _PosterWorker(urls)
        worker.moveToThread(thr)

        worker.loaded.connect(self._on_loaded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(thr.quit)
        worker.finished.connect(worker.deleteLater)
        thr.finished.connect(thr.deleteLater)
        thr.finished.connect(self._on_thread_done)

        thr.started.connect(worker.run)
        self._thread, self._worker = thr, worker
        thr.start()

    @Slot(str, object)
    def _on_loaded(self, url: str, data: bytes) -> None:
        pix = QPixmap()
        if not pix.loadFromData(data):
            log_debug(f"poster {url} is not a readable image")
            self._on_failed(url)
            return
        self._cache[url] = pix
        for receiver in self._waiting.pop(url, []):
            if isValid(receiver):
                receiver.set_poster(pix)

    @Slot(str)
    def _on_failed(self, url: str) -> None:
        self._waiting.pop(url, None)

    @Slot()
    def _on_thread_done(self) -> None:
        self._thread, self._worker = None, None
        self._start_next()
