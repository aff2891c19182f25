import pytest
from fastapi.testclient import TestClient

from geojson_builder.core.accessors import Accessor2D, Accessor3D
from geojson_builder.main import app


class RecordingGetter:
    """Point getter over nested lists that remembers every index it was asked for."""

    def __init__(self, points):
        self.points = points
        self.calls = []

    def __call__(self, *indices):
        self.calls.append(indices)
        value = self.points
        for index in indices:
            value = value[index]
        return value


@pytest.fixture
def accessor():
    def make(points, dimensions=2):
        getter = RecordingGetter(points)
        return Accessor3D(getter) if dimensions == 3 else Accessor2D(getter)
    return make


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def unit_square_ccw():
    return [(0, 0), (1, 0), (1, 1), (0, 1)]


@pytest.fixture
def unit_square_cw():
    return [(0, 0), (0, 1), (1, 1), (1, 0)]


@pytest.fixture
def exterior_3d():
    return [(0, 0, 0.5), (1.5, 0, 0.3), (1.5, 1.5, 0.6), (0, 1.5, 0.9)]


@pytest.fixture
def holes_3d():
    return [
        [(0.25, 0.25, 0.5), (0.35, 0.75, 0.6), (0.5, 0.25, 0.7)],
        [(1, 0.25, 0.5), (1.25, 0.25, 0.6), (1.125, 0.5, 0.7)],
    ]
