import os
import shutil

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["JETSTREAM_FETCH_POSTERS"] = "0"

import pytest
from PySide6.QtWidgets import QApplication # type: ignore

from jetstream.settings import ASSETS_DIR
from jetstream.catalog import AssetsReader, MovieRepository
from jetstream.gui.context import AppContext
from jetstream.gui.navigation import NavController


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(scope="session")
def repo():
    return MovieRepository()


@pytest.fixture
def nav():
    return NavController()


@pytest.fixture
def ctx(qapp, repo, nav):
    return AppContext(repository=repo, nav=nav)


@pytest.fixture
def assets_dir(tmp_path):
    """Writable copy of the bundled assets."""
    target = tmp_path / "assets"
    shutil.copytree(ASSETS_DIR, target)
    return target


@pytest.fixture
def reader_for():
    return lambda path: AssetsReader(path)
