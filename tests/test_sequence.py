"""Tests for swatchbook.core.sequence — nearest-neighbour ordering and neutral settling."""

from swatchbook.core.sequence import (
    nearest_neighbour_path,
    path_length,
    perceptual_coordinates,
    sequence,
    settle_light_neutrals,
    two_opt,
)
from swatchbook.core.types import ColorEntry

RGB = [
    ColorEntry('Red', '#FF0000'),
    ColorEntry('Green', '#00FF00'),
    ColorEntry('Blue', '#0000FF'),
]

MIXED = [
    ColorEntry('Crimson', '#DC143C'),
    ColorEntry('Navy', '#000080'),
    ColorEntry('Gold', '#FFD700'),
    ColorEntry('Tomato', '#FF6347'),
    ColorEntry('Teal', '#008080'),
    ColorEntry('Khaki', '#F0E68C'),
    ColorEntry('SkyBlue', '#87CEEB'),
    ColorEntry('Orchid', '#DA70D6'),
    ColorEntry('Olive', '#808000'),
    ColorEntry('Salmon', '#FA8072'),
    ColorEntry('Indigo', '#4B0082'),
    ColorEntry('Lime', '#32CD32'),
    ColorEntry('Maroon', '#800000'),
    ColorEntry('Turquoise', '#40E0D0'),
]


class TestSequence:
    def test_empty(self):
        assert sequence([]) == []

    def test_single(self):
        assert sequence([ColorEntry('Only', '#123456')]) == [0]

    def test_starts_at_first_entry(self):
        assert sequence(RGB)[0] == 0
        assert sequence(MIXED)[0] == 0

    def test_is_permutation(self):
        for entries in (RGB, MIXED):
            order = sequence(entries)
            assert sorted(order) == list(range(len(entries)))

    def test_deterministic(self):
        assert sequence(MIXED) == sequence(list(MIXED))

    def test_nearest_first(self):
        entries = [
            ColorEntry('Red', '#FF0000'),
            ColorEntry('Blue', '#0000FF'),
            ColorEntry('AlmostRed', '#FE0101'),
        ]
        assert sequence(entries) == [0, 2, 1]

    def test_identical_colours_tie_break_by_index(self):
        entries = [
            ColorEntry('A', '#112233'),
            ColorEntry('B', '#FF0000'),
            ColorEntry('C', '#112233'),
            ColorEntry('D', '#112233'),
        ]
        assert sequence(entries) == [0, 2, 3, 1]


class TestLightNeutrals:
    ENTRIES = [
        ColorEntry('Red', '#FF0000'),
        ColorEntry('White', '#FFFFFF'),
        ColorEntry('Gainsboro', '#DDDDDD'),
        ColorEntry('Blue', '#0000FF'),
        ColorEntry('Ghost', '#F0F0F0'),
        ColorEntry('Charcoal', '#333333'),
        ColorEntry('Pink', '#FFC0CB'),
    ]

    def test_light_neutrals_last_by_lightness(self):
        order = sequence(self.ENTRIES)
        assert order[-3:] == [2, 4, 1]

    def test_dark_neutral_keeps_path_position(self):
        coords = perceptual_coordinates(self.ENTRIES)
        walk = [i for i in nearest_neighbour_path(coords) if i not in (1, 2, 4)]
        assert sequence(self.ENTRIES)[:-3] == walk

    def test_settle_is_stable(self):
        entries = [ColorEntry('W1', '#FFFFFF'), ColorEntry('Red', '#FF0000'), ColorEntry('W2', '#FFFFFF')]
        assert settle_light_neutrals([0, 1, 2], entries) == [1, 0, 2]
        assert settle_light_neutrals([2, 1, 0], entries) == [1, 2, 0]

    def test_saturated_light_colour_not_moved(self):
        # Pink is light but saturated
        entries = [ColorEntry('Pink', '#FFC0CB'), ColorEntry('Red', '#FF0000')]
        assert settle_light_neutrals([0, 1], entries) == [0, 1]


class TestNearestNeighbourPath:
    def test_takes_n_minus_one_steps(self):
        coords = perceptual_coordinates(MIXED)
        path = nearest_neighbour_path(coords)
        assert len(path) == len(MIXED)
        assert len(set(path)) == len(MIXED)

    def test_empty(self):
        assert nearest_neighbour_path([]) == []


class TestTwoOpt:
    def test_never_longer(self):
        coords = perceptual_coordinates(MIXED)
        path = nearest_neighbour_path(coords)
        refined = two_opt(path, coords, max_passes=8)
        assert path_length(refined, coords) <= path_length(path, coords) + 1e-12

    def test_keeps_start_and_permutation(self):
        coords = perceptual_coordinates(MIXED)
        refined = two_opt(nearest_neighbour_path(coords), coords, max_passes=8)
        assert refined[0] == 0
        assert sorted(refined) == list(range(len(MIXED)))

    def test_uncrosses_path(self):
        # Points on a line: 0 at the origin, walk order 0,2,1,3 doubles back
        coords = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (2.0, 0.0, 0.0), (3.0, 0.0, 0.0)]
        assert two_opt([0, 2, 1, 3], coords, max_passes=4) == [0, 1, 2, 3]

    def test_short_paths_unchanged(self):
        coords = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)]
        assert two_opt([0, 1], coords, max_passes=4) == [0, 1]

    def test_zero_passes_is_identity(self):
        coords = perceptual_coordinates(MIXED)
        path = nearest_neighbour_path(coords)
        assert two_opt(path, coords, max_passes=0) == path
