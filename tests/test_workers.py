import time

import pytest
import requests
import shiboken6
from PySide6.QtCore    import QBuffer, QCoreApplication, QIODevice, QObject # type: ignore
from PySide6.QtGui     import QColor, QPixmap # type: ignore

from jetstream.gui import workers
from jetstream.gui.workers import PosterLoader, _PosterWorker, fetch_image_bytes


class _Response:
    def __init__(self, content=b"", status=200):
        self.content = content
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class _Receiver(QObject):
    def __init__(self):
        super().__init__()
        self.pixmaps = []

    def set_poster(self, pixmap):
        self.pixmaps.append(pixmap)


def _png_bytes() -> bytes:
    pix = QPixmap(4, 6)
    pix.fill(QColor("#3b82f6"))
    buf = QBuffer()
    buf.open(QIODevice.WriteOnly)
    pix.save(buf, "PNG")
    buf.close()
    return bytes(buf.data())


@pytest.fixture
def fake_get(monkeypatch):
    calls = []
    responses = {}

    def get(url, timeout=None):
        calls.append(url)
        result = responses.get(url, _Response(status=404))
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(workers.requests, "get", get)
    get.calls = calls
    get.responses = responses
    return get


def test_fetch_returns_body(fake_get):
    fake_get.responses["http://x/ok.png"] = _Response(b"abc")
    assert fetch_image_bytes("http://x/ok.png") == b"abc"


def test_fetch_raises_on_http_error(fake_get):
    with pytest.raises(requests.HTTPError):
        fetch_image_bytes("http://x/missing.png")


def test_worker_reports_each_url(qapp, fake_get):
    fake_get.responses["http://x/a.png"] = _Response(b"a")
    fake_get.responses["http://x/b.png"] = requests.ConnectionError("offline")
    worker = _PosterWorker(["http://x/a.png", "http://x/b.png"])
    loaded, failed, finished = [], [], []
    worker.loaded.connect(lambda url, data: loaded.append((url, data)))
    worker.failed.connect(failed.append)
    worker.finished.connect(finished.append)

    worker.run()

    assert loaded == [("http://x/a.png", b"a")]
    assert failed == ["http://x/b.png"]
    assert finished == [False]


def test_disabled_loader_never_fetches(qapp, fake_get):
    loader = PosterLoader(enabled=False)
    receiver = _Receiver()
    loader.request("http://x/a.png", receiver)
    loader.request(None, receiver)
    assert fake_get.calls == []
    assert receiver.pixmaps == []


def test_loader_delivers_and_caches(qapp, fake_get):
    url = "http://x/poster.png"
    fake_get.responses[url] = _Response(_png_bytes())
    loader = PosterLoader(enabled=True)
    first = _Receiver()
    loader.request(url, first)

    deadline = time.monotonic() + 10
    while not first.pixmaps and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.01)
    loader.shutdown()

    assert len(first.pixmaps) == 1
    assert first.pixmaps[0].width() == 4
    assert loader.cached(url) is not None

    second = _Receiver()
    loader.request(url, second)
    assert len(second.pixmaps) == 1
    assert fake_get.calls == [url]


def test_unreadable_image_is_dropped(qapp):
    loader = PosterLoader(enabled=True)
    loader._on_loaded("http://x/not-an-image", b"not an image")
    assert loader.cached("http://x/not-an-image") is None


def test_deleted_receiver_is_skipped(qapp, monkeypatch):
    url = "http://x/gone.png"
    monkeypatch.setattr(PosterLoader, "_start_next", lambda self: None)
    loader = PosterLoader(enabled=True)
    gone, alive = _Receiver(), _Receiver()
    loader.request(url, gone)
    loader.request(url, alive)
    shiboken6.delete(gone)

    loader._on_loaded(url, _png_bytes())

    assert len(alive.pixmaps) == 1
    assert loader.cached(url) is not None
