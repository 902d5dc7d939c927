"""Perceptual ordering of colour entries.

The main path is a greedy nearest-neighbour walk through Oklab, starting at
the first entry. It approximates the shortest Hamiltonian path in O(n^2) and
is not optimal: the last few steps can jump a long way once the nearby
colours are used up. `two_opt` can shorten such a path while keeping the
start fixed and the result deterministic.

After the walk, light neutrals (whites, very light greys) are moved to the
end, sorted by lightness. The sort is stable, so every other entry keeps its
walk order.
"""

from collections.abc import Sequence

from swatchbook.core.colour import normalize, parse_hex, perceptual_distance, to_hsl, to_perceptual
from swatchbook.core.config import NEUTRAL
from swatchbook.core.types import ColorEntry, Ordering, PerceptualCoordinate


def perceptual_coordinates(entries: Sequence[ColorEntry]) -> list[PerceptualCoordinate]:
    return [to_perceptual(parse_hex(e.hex)) for e in entries]


def nearest_neighbour_path(coords: Sequence[PerceptualCoordinate]) -> Ordering:
    """Greedy walk from index 0. Ties go to the lowest unvisited index."""
    n = len(coords)
    if n == 0:
        return []

    path = [0]
    visited = [False] * n
    visited[0] = True
    current = coords[0]

    for _ in range(1, n):
        nearest: int | None = None
        best = 0.0
        for i, point in enumerate(coords):
            if visited[i]:
                continue
            dist = perceptual_distance(current, point)
            if nearest is None or dist < best:
                nearest, best = i, dist
        visited[nearest] = True
        path.append(nearest)
        current = coords[nearest]

    return path


def path_length(path: Sequence[int], coords: Sequence[PerceptualCoordinate]) -> float:
    return sum(perceptual_distance(coords[a], coords[b]) for a, b in zip(path, path[1:]))


def two_opt(path: Sequence[int], coords: Sequence[PerceptualCoordinate], max_passes: int) -> Ordering:
    """Refine an open path by segment reversal. path[0] never moves.

    Each pass scans every (i, j) pair once, so the cost is O(n^2) per pass and
    bounded by max_passes. Improvements below 1e-12 are ignored to keep the
    result independent of float noise.
    """
    route = list(path)
    n = len(route)
    if n < 3:
        return route

    def d(a: int, b: int) -> float:
        return perceptual_distance(coords[route[a]], coords[route[b]])

    for _ in range(max_passes):
        improved = False
        for i in range(1, n - 1):
            for j in range(i + 1, n):
                before = d(i - 1, i)
                after = d(i - 1, j)
                if j + 1 < n:
                    before += d(j, j + 1)
                    after += d(i, j + 1)
                if after < before - 1e-12:
                    route[i : j + 1] = reversed(route[i : j + 1])
                    improved = True
        if not improved:
            break
    return route


def _neutral_key(entry: ColorEntry) -> tuple[int, int]:
    hsl = to_hsl(normalize(parse_hex(entry.hex)))
    if hsl.saturation < NEUTRAL['max_saturation'] and hsl.lightness > NEUTRAL['min_lightness']:
        return (1, round(hsl.lightness * 100))
    return (0, 0)


def settle_light_neutrals(path: Sequence[int], entries: Sequence[ColorEntry]) -> Ordering:
    """Stable re-sort pushing bright near-greys to the end, ordered by lightness."""
    return sorted(path, key=lambda i: _neutral_key(entries[i]))


def sequence(entries: Sequence[ColorEntry]) -> Ordering:
    """Visiting order placing perceptually similar colours next to each other."""
    coords = perceptual_coordinates(entries)
    return settle_light_neutrals(nearest_neighbour_path(coords), entries)
