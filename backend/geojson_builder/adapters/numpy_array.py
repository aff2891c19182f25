from typing import Sequence

import numpy as np

from geojson_builder.core.accessors import Accessor2D, Accessor3D, CountAccessor, PointAccessor
from geojson_builder.core.constants import POSITION_2D_SIZE, POSITION_3D_SIZE


def _as_points(points) -> np.ndarray:
    # ndarrays are used as they are, other sequences are converted once
    array = np.asarray(points)
    if array.ndim != 2 or array.shape[1] not in (POSITION_2D_SIZE, POSITION_3D_SIZE):
        raise ValueError(f'Points must be an (N, 2) or (N, 3) array, got shape {array.shape}')
    return array


def _accessor_for(dimensions: int, get) -> PointAccessor:
    if dimensions == POSITION_3D_SIZE:
        return Accessor3D(get)
    return Accessor2D(get)


def array_accessor(points) -> tuple[int, PointAccessor]:
    """Returns (count, accessor) reading row i of an (N, 2) or (N, 3) array.

    Rows are read when the builders ask for them, so later writes to the array
    are seen by the accessor. Lists are first converted to an array.
    """
    array = _as_points(points)
    return len(array), _accessor_for(array.shape[1], lambda i: tuple(array[i]))


def nested_array_accessor(arrays: Sequence) -> tuple[int, CountAccessor, PointAccessor]:
    """Returns (count, length, accessor) addressing point j of array i.

    All arrays must share the same dimensionality.
    """
    converted = [_as_points(points) for points in arrays]
    dimensions = {array.shape[1] for array in converted}
    if len(dimensions) > 1:
        raise ValueError(f'Arrays mix 2D and 3D points: {sorted(dimensions)}')

    return (
        len(converted),
        lambda i: len(converted[i]),
        _accessor_for(dimensions.pop() if dimensions else POSITION_2D_SIZE, lambda i, j: tuple(converted[i][j])),
    )
