import logging

import pytest

from PyQt5.QtCore import QCoreApplication

import config


def pytest_configure():
    config.configure_logging(logging.DEBUG)


@pytest.fixture(scope='session')
def qapp() -> QCoreApplication:
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
