# Shared fixtures: a headless QCoreApplication for worker threads and signal
# delivery, plus stores rooted in a temporary directory so no test touches
# the real per-user launcher directory.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QCoreApplication  # noqa: E402

from launcher.config.store import ConfigStore  # noqa: E402
from launcher.services.service_locator import services  # noqa: E402
from launcher.util.os_info import OperatingSystem  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def launcher_dir(tmp_path):
    return tmp_path / "launcher"


@pytest.fixture
def store(launcher_dir):
    s = ConfigStore(launcher_dir, operating_system=OperatingSystem.LINUX)
    yield s
    s.reader.wait()
    s.writer.wait()


@pytest.fixture
def clean_shared_store():
    ConfigStore.reset_instance()
    yield
    ConfigStore.reset_instance()


@pytest.fixture
def clean_services():
    services.clear()
    yield services
    services.clear()
