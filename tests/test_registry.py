"""Tests for swatchbook.registry — sequencer discovery."""

import pytest
from swatchbook.core.sequence import sequence
from swatchbook.core.types import ColorEntry, Sequencer
from swatchbook.registry import all_sequencers, discover, get, module

ENTRIES = [
    ColorEntry('White', '#FFFFFF'),
    ColorEntry('Crimson', '#DC143C'),
    ColorEntry('Navy', '#000080'),
    ColorEntry('Gold', '#FFD700'),
    ColorEntry('Tomato', '#FF6347'),
    ColorEntry('Teal', '#008080'),
    ColorEntry('Snow', '#FAFAFA'),
]


class TestDiscover:
    def test_finds_all_sequencers(self):
        assert set(discover()) == {'nearest', 'two-opt', 'as-given'}

    def test_all_sequencers_matches_discover(self):
        assert all_sequencers() is discover()

    def test_unknown_raises_with_available(self):
        with pytest.raises(KeyError, match='Available: as-given, nearest, two-opt'):
            get('random')

    def test_module_is_defining_module(self):
        assert module('two-opt').__name__ == 'swatchbook.sequencers.two_opt'
        assert module('as-given').sequencer is get('as-given')

    def test_module_unknown_raises(self):
        with pytest.raises(KeyError):
            module('random')


class TestSequencers:
    @pytest.mark.parametrize('name', ['nearest', 'two-opt', 'as-given'])
    def test_permutation(self, name):
        order = get(name).order(ENTRIES)
        assert sorted(order) == list(range(len(ENTRIES)))

    def test_nearest_is_sequence(self):
        assert get('nearest').order(ENTRIES) == sequence(ENTRIES)

    def test_two_opt_settles_neutrals(self):
        order = get('two-opt').order(ENTRIES)
        # Snow (98%) before White (100%), both last
        assert order[-2:] == [6, 0]

    def test_as_given_is_identity(self):
        assert get('as-given').order(ENTRIES) == list(range(len(ENTRIES)))

    def test_unregistered_run_function(self):
        with pytest.raises(RuntimeError):
            Sequencer(name='empty').order(ENTRIES)
