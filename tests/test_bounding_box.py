import itertools

import pytest

from maze_lib.schema import BoundingBox

BOXES = [
    BoundingBox(1, 2, 1, 2),
    BoundingBox(2, 3, 2, 3),
    BoundingBox(0, 9, 4, 4),
    BoundingBox(5, 5, 0, 9),
    BoundingBox(7, 8, 7, 8),
    BoundingBox(3, 3, 3, 3),
]


def test_boxes_with_same_bounds_are_equal():
    assert BoundingBox(1, 10, 1, 10) == BoundingBox(1, 10, 1, 10)
    assert hash(BoundingBox(1, 10, 1, 10)) == hash(BoundingBox(1, 10, 1, 10))
    assert BoundingBox(1, 10, 1, 10) != BoundingBox(1, 10, 1, 9)


@pytest.mark.parametrize(
    "bounds", [(-1, 2, 0, 2), (0, 2, -1, 2), (3, 2, 0, 2), (0, 2, 3, 2)]
)
def test_invalid_bounds_fail_fast(bounds):
    with pytest.raises(ValueError):
        BoundingBox(*bounds)


def test_overlapping_boxes_intersect():
    box1 = BoundingBox(1, 2, 1, 2)
    box2 = BoundingBox(2, 3, 2, 3)

    assert box1.intersects(box2)
    assert box1.intersect(box2) == BoundingBox(2, 2, 2, 2)


def test_disjoint_boxes_do_not_intersect():
    box1 = BoundingBox(1, 2, 1, 2)
    box2 = BoundingBox(3, 4, 1, 2)

    assert not box1.intersects(box2)
    assert box1.intersect(box2) is None


@pytest.mark.parametrize("a, b", list(itertools.combinations(BOXES, 2)))
def test_intersection_is_symmetric_and_consistent(a, b):
    assert a.intersect(b) == b.intersect(a)
    assert a.intersects(b) == b.intersects(a)
    assert (a.intersect(b) is not None) == a.intersects(b)


def test_shift_translates_both_axes():
    assert BoundingBox(1, 2, 3, 4).shift(2, -1) == BoundingBox(3, 4, 2, 3)
    assert BoundingBox(1, 2, 3, 4).shift(dy=1) == BoundingBox(1, 2, 4, 5)


def test_shift_below_zero_is_rejected():
    with pytest.raises(ValueError):
        BoundingBox(0, 1, 0, 1).shift(dx=-1)


def test_split_by_middle_row_produces_two_boxes():
    box = BoundingBox(1, 3, 1, 9)
    pieces = box.split(BoundingBox(1, 3, 4, 5))

    assert pieces == [BoundingBox(1, 3, 6, 9), BoundingBox(1, 3, 1, 3)]


def test_split_by_end_column_produces_one_box():
    box = BoundingBox(1, 8, 8, 8)
    assert box.split(BoundingBox(8, 8, 8, 8)) == [BoundingBox(1, 7, 8, 8)]


def test_split_by_whole_box_produces_nothing():
    box = BoundingBox(2, 4, 2, 4)
    assert box.split(box) == []


def test_split_without_shared_axis_fails():
    with pytest.raises(ValueError):
        BoundingBox(0, 9, 0, 9).split(BoundingBox(2, 3, 2, 3))


@pytest.mark.parametrize(
    "box, delimiter",
    [
        (BoundingBox(2, 7, 1, 9), BoundingBox(2, 7, 3, 5)),
        (BoundingBox(2, 7, 1, 9), BoundingBox(2, 7, 1, 1)),
        (BoundingBox(0, 9, 4, 6), BoundingBox(3, 3, 4, 6)),
        (BoundingBox(0, 9, 4, 6), BoundingBox(0, 9, 4, 6)),
    ],
)
def test_split_pieces_rebuild_the_box(box, delimiter):
    pieces = box.split(delimiter)
    covered = set(delimiter.pixels())

    for i, piece in enumerate(pieces):
        assert not piece.intersects(delimiter)
        for other in pieces[i + 1 :]:
            assert not piece.intersects(other)
        covered |= set(piece.pixels())

    assert covered == set(box.pixels())
    assert sum(p.area for p in pieces) + delimiter.area == box.area


def test_union_covers_both_boxes():
    union = BoundingBox(1, 1, 2, 7).union(BoundingBox(1, 8, 8, 8))
    assert union == BoundingBox(1, 8, 2, 8)


def test_list_conversion():
    box = BoundingBox(1, 2, 3, 4)
    assert box.to_list() == [1, 2, 3, 4]
    assert BoundingBox.from_list([1, 2, 3, 4]) == box
    assert box.width == 2 and box.height == 2 and box.x_range == 1


def test_contains_requires_every_edge_inside():
    outer = BoundingBox(1, 5, 1, 5)

    assert outer.contains(BoundingBox(2, 4, 1, 5))
    assert outer.contains(outer)
    assert not outer.contains(BoundingBox(0, 4, 2, 3))
    assert not BoundingBox(2, 4, 1, 5).contains(outer)
