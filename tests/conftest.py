import json

import pytest

from vendnav.api import machines
from vendnav.api.models import Coordinate, Stop


def make_stop(lat, lng, **meta):
    return Stop(coordinate=Coordinate(lat, lng), **meta)


@pytest.fixture
def stop_factory():
    return make_stop


@pytest.fixture
def write_catalog(tmp_path, monkeypatch):
    """Write records to a temporary catalog and point the config at it."""

    def _write(records):
        path = tmp_path / "machines.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        monkeypatch.setenv("VENDNAV_DATA_FILE", str(path))
        machines.clear_cache()
        return path

    yield _write
    machines.clear_cache()


@pytest.fixture
def equator_records():
    return [
        {"id": "a", "retailer": "Target", "machineID": "T-1", "address": "1 First St",
         "city": "Springfield", "latitude": 0.0, "longitude": 1.0},
        {"id": "b", "retailer": "Walmart", "machineID": "W-5", "address": "5 Fifth St",
         "city": "Springfield", "latitude": 0.0, "longitude": 5.0},
        {"id": "c", "retailer": "Target", "machineID": "T-2", "address": "2 Second St",
         "city": "Shelbyville", "latitude": 0.0, "longitude": 2.0},
    ]
