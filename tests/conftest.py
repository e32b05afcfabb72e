import pytest

from bars import WorkingArray
from engine import Pacer, Recorder, SortDriver
from ui import BarCanvas, ControlPanel


@pytest.fixture
def make_driver():
    """Build a zero-delay driver over a fixed array, with a Recorder attached."""

    def _make(values=(), strategy=None, pacer=None, **kwargs):
        driver = SortDriver(
            display=BarCanvas(),
            controls=ControlPanel(),
            strategy=strategy,
            pacer=pacer or Pacer(0),
            recorder=Recorder(),
            **kwargs,
        )
        driver.load(WorkingArray(list(values)))
        return driver

    return _make
