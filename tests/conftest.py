import pytest
from PySide6.QtCore import QCoreApplication

from leastsquaresregression.model.engine import RegressionEngine
from leastsquaresregression.model.geometry import Bounds
from leastsquaresregression.model.line import UserLine
from leastsquaresregression.model.point_set import PointSet


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def point_set():
    return PointSet()


@pytest.fixture
def user_line():
    return UserLine()


@pytest.fixture
def bounds():
    return Bounds(0.0, 0.0, 20.0, 20.0)


@pytest.fixture
def engine(point_set, user_line, bounds):
    return RegressionEngine(point_set, user_line, bounds)


@pytest.fixture
def recorder():
    """Collects signal payloads; connect `recorder.slot` to a signal."""
    class Recorder:
        def __init__(self):
            self.calls = []

        def slot(self, value):
            self.calls.append(value)

    return Recorder()
