import pytest

from mathpuzzles.scrabble.index import build_weight_classes


@pytest.fixture
def tiles_by_value():
    """A fresh weight-class index over the standard tiles, all counters at zero."""
    return build_weight_classes()


def all_counters(tiles_by_value):
    """Every draw counter in the index, class counters first."""
    counters = [tiles.drawn for tiles in tiles_by_value.values()]
    for tiles in tiles_by_value.values():
        counters.extend(live.drawn for live in tiles.live_counted_tiles)
    return counters
