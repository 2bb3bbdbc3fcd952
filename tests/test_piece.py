from tetris_piece import Piece, SHAPES, COLORS, NAMES, rotate_cw


def test_catalog_has_seven_colored_shapes():
    assert len(SHAPES) == len(COLORS) == len(NAMES) == 7
    assert len(set(COLORS)) == 7
    for shape in SHAPES:
        assert sum(map(sum, shape)) == 4


def test_rotating_square_four_times_is_identity():
    o = SHAPES[NAMES.index("O")]
    s = o
    for _ in range(4):
        s = rotate_cw(s)
    assert s == o


def test_every_shape_returns_after_four_rotations():
    for shape in SHAPES:
        s = shape
        for _ in range(4):
            s = rotate_cw(s)
        assert s == shape


def test_i_piece_toggles_orientation():
    i = SHAPES[NAMES.index("I")]
    vertical = rotate_cw(i)
    assert vertical == ((1,), (1,), (1,), (1,))
    assert rotate_cw(vertical) == i


def test_rotation_reads_columns_bottom_to_top():
    j = SHAPES[NAMES.index("J")]
    assert rotate_cw(j) == ((1, 1), (1, 0), (1, 0))


def test_rotation_does_not_touch_source():
    t = SHAPES[NAMES.index("T")]
    rotate_cw(t)
    assert t == ((0, 1, 0), (1, 1, 1))


def test_spawn_is_centered_at_top():
    xs = {NAMES[k]: Piece.spawn(k).x for k in range(7)}
    assert xs == {"I": 3, "J": 4, "L": 4, "O": 4, "S": 4, "T": 4, "Z": 4}
    p = Piece.spawn(0)
    assert p.y == 0
    assert p.color == COLORS[0]
    assert p.name == "I"


def test_spawn_uses_grid_width():
    assert Piece.spawn(NAMES.index("O"), cols=6).x == 2


def test_cells_are_absolute():
    p = Piece.spawn(NAMES.index("T"))
    assert sorted(p.cells()) == [(4, 1), (5, 0), (5, 1), (6, 1)]
