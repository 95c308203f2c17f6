import pytest
from transport.directions import Direction, VALID_DIRECTIONS

def test_six_directions_in_ordinal_order():
    assert [d.ordinal for d in VALID_DIRECTIONS] == [0, 1, 2, 3, 4, 5]
    assert VALID_DIRECTIONS[0] is Direction.DOWN
    assert VALID_DIRECTIONS[5] is Direction.EAST

@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_an_involution(direction):
    assert direction.opposite is not direction
    assert direction.opposite.opposite is direction

@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_offsets_cancel(direction):
    a = direction.offset
    b = direction.opposite.offset
    assert (a[0] + b[0], a[1] + b[1], a[2] + b[2]) == (0, 0, 0)

def test_offsets_are_unit_and_unique():
    offsets = {d.offset for d in Direction}
    assert len(offsets) == 6
    for off in offsets:
        assert sum(abs(c) for c in off) == 1

def test_from_ordinal():
    for d in Direction:
        assert Direction.from_ordinal(d.ordinal) is d
