from typing import Sequence


def signed_edge_sum(coords: Sequence[Sequence[float]]) -> float:
    """Sums (x2 - x1) * (y2 + y1) over every edge, closing last to first.

    Positive for clockwise paths, negative for counter-clockwise ones. Only the
    first two components of each position are read.
    """
    total = 0.0
    size = len(coords)
    for i in range(size):
        x1, y1 = coords[i][0], coords[i][1]
        x2, y2 = coords[(i + 1) % size][0], coords[(i + 1) % size][1]
        total += (x2 - x1) * (y2 + y1)
    return total


def is_clockwise(coords: Sequence[Sequence[float]]) -> bool:
    # Zero-area paths are not clockwise
    return signed_edge_sum(coords) > 0


def is_counter_clockwise(coords: Sequence[Sequence[float]]) -> bool:
    return signed_edge_sum(coords) < 0
