"""Index-addressable accessors over caller-owned point storage.

The builders never receive materialized coordinate arrays. Callers hand them a
count plus an accessor and the builders pull one position per index. The arity
of the positions is chosen by wrapping the callable in `Accessor2D` or
`Accessor3D`, never by inspecting what the callable returns.
"""
from dataclasses import dataclass
from functools import partial
from typing import Callable, ClassVar


CountAccessor = Callable[..., int]


@dataclass(frozen=True)
class Accessor2D:
    get: Callable[..., tuple[float, float]]

    dimensions: ClassVar[int] = 2

    def __call__(self, *indices: int) -> tuple[float, float]:
        lon, lat = self.get(*indices)
        return lon, lat

    def bind(self, index: int) -> 'Accessor2D':
        return Accessor2D(partial(self.get, index))


@dataclass(frozen=True)
class Accessor3D:
    get: Callable[..., tuple[float, float, float]]

    dimensions: ClassVar[int] = 3

    def __call__(self, *indices: int) -> tuple[float, float, float]:
        lon, lat, alt = self.get(*indices)
        return lon, lat, alt

    def bind(self, index: int) -> 'Accessor3D':
        return Accessor3D(partial(self.get, index))


PointAccessor = Accessor2D | Accessor3D


def check_point_accessor(accessor: PointAccessor) -> None:
    if not isinstance(accessor, (Accessor2D, Accessor3D)):
        raise TypeError(
            'Point accessor must be wrapped in Accessor2D or Accessor3D, '
            f'got {type(accessor).__name__}'
        )


def bind_count(get_count: CountAccessor, index: int) -> CountAccessor:
    return partial(get_count, index)
