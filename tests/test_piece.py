import pytest

from tetris_piece import Piece, DEFAULT_BRICKS, CUSTOM_BRICKS, BRICK_HEIGHT, BRICK_WIDTH, BrickColor

ALL_BRICKS = DEFAULT_BRICKS + CUSTOM_BRICKS


@pytest.mark.parametrize("brick", ALL_BRICKS, ids=lambda b: b.name)
def test_rotation_forward_is_circular(brick):
    piece = Piece(brick)
    seen = []
    for _ in range(brick.total_states):
        seen.append(piece.state)
        piece.next_state()
    assert piece.state == 0
    assert seen == list(range(brick.total_states))


@pytest.mark.parametrize("brick", ALL_BRICKS, ids=lambda b: b.name)
def test_rotation_backward_is_circular(brick):
    piece = Piece(brick)
    piece.prev_state()
    assert piece.state == brick.total_states - 1
    for _ in range(brick.total_states - 1):
        piece.prev_state()
    assert piece.state == 0


@pytest.mark.parametrize("brick", ALL_BRICKS, ids=lambda b: b.name)
def test_masks_are_four_by_four(brick):
    for state in brick.states:
        assert len(state) == BRICK_HEIGHT
        assert all(len(row) == BRICK_WIDTH for row in state)


def test_standard_set():
    names = [b.name for b in DEFAULT_BRICKS]
    assert names == ["I", "O", "S", "Z", "L", "J", "T"]
    counts = {b.name: b.total_states for b in DEFAULT_BRICKS}
    assert counts == {"I": 2, "O": 1, "S": 2, "Z": 2, "L": 4, "J": 4, "T": 4}
    assert sorted(b.color for b in DEFAULT_BRICKS) == [int(c) for c in BrickColor]
    for brick in DEFAULT_BRICKS:
        for state in brick.states:
            assert sum(map(sum, state)) == 4


def test_preview_is_colourised():
    piece = Piece(DEFAULT_BRICKS[0])
    preview = piece.preview()
    assert preview[1] == [BrickColor.LIGHT_BLUE] * 4
    assert preview[0] == [0, 0, 0, 0]
