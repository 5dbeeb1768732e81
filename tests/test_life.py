import random

import pytest

from kitbag.life import MARGIN, PIXEL, LifePattern


def _place(life, x, y):
    return life.new_life(MARGIN + PIXEL * x, MARGIN + PIXEL * y)


def _alive(life):
    return {(x, y) for x in range(life.size) for y in range(life.size) if life.has_life(x, y)}


def test_new_life_maps_screen_to_cell():
    life = LifePattern(10)
    assert _place(life, 3, 4) is True
    assert _alive(life) == {(3, 4)}


def test_new_life_outside_board():
    life = LifePattern(4)
    assert _place(life, 4, 0) is False
    assert _alive(life) == set()


def test_has_life_off_board():
    life = LifePattern(3)
    _place(life, 0, 0)
    assert life.has_life(0, 0) is True
    assert life.has_life(-1, 0) is False
    assert life.has_life(0, 3) is False


def test_blinker_oscillates():
    life = LifePattern(5)
    horizontal = {(1, 2), (2, 2), (3, 2)}
    for x, y in horizontal:
        _place(life, x, y)
    life.next()
    assert _alive(life) == {(2, 1), (2, 2), (2, 3)}
    life.next()
    assert _alive(life) == horizontal


def test_block_is_stable():
    life = LifePattern(6)
    block = {(2, 2), (3, 2), (2, 3), (3, 3)}
    for x, y in block:
        _place(life, x, y)
    life.next()
    assert _alive(life) == block


def test_lonely_cell_dies():
    life = LifePattern(5)
    _place(life, 2, 2)
    life.next()
    assert _alive(life) == set()


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def test_init_threshold():
    life = LifePattern(4)
    life.init(_FixedRng(81))
    assert len(_alive(life)) == 16
    life.init(_FixedRng(80))
    assert _alive(life) == set()


def test_init_is_reproducible_with_seed():
    a, b = LifePattern(8), LifePattern(8)
    a.init(random.Random(7))
    b.init(random.Random(7))
    assert a.render() == b.render()


def test_render_shape_and_count():
    life = LifePattern(5)
    _place(life, 0, 0)
    _place(life, 4, 4)
    text = life.render()
    assert len(text.splitlines()) == 5
    assert text.count("#") == len(_alive(life))
    assert text.splitlines()[0][0] == "#"


def test_invalid_size():
    with pytest.raises(ValueError):
        LifePattern(0)