from maze_lib.analysis.trimmer import trim_regions, trim_solution, trim_untraversed
from maze_lib.schema import BoundingBox

ENTRANCE = BoundingBox(1, 1, 1, 1)
EXIT = BoundingBox(8, 8, 1, 1)
COLUMN_1 = BoundingBox(1, 1, 1, 8)
ROW_8 = BoundingBox(1, 8, 8, 8)
COLUMN_8 = BoundingBox(8, 8, 1, 8)


def test_single_corridor_is_left_alone():
    assert trim_untraversed([COLUMN_1], ENTRANCE, EXIT) == [COLUMN_1]


def test_wide_corridors_are_narrowed_to_the_walked_part():
    # A wide horizontal hall crossed by a vertical shaft near its left end.
    hall = BoundingBox(1, 9, 1, 3)
    shaft = BoundingBox(2, 3, 1, 9)
    entrance = BoundingBox(1, 1, 1, 3)
    exit = BoundingBox(2, 3, 9, 9)

    trimmed = trim_untraversed([hall, shaft], entrance, exit)

    assert trimmed == [BoundingBox(1, 3, 1, 3), BoundingBox(2, 3, 1, 9)]


def test_chain_is_trimmed_pairwise_from_the_entrance():
    trimmed = trim_untraversed([COLUMN_1, ROW_8, COLUMN_8], ENTRANCE, EXIT)

    assert trimmed == [COLUMN_1, ROW_8, COLUMN_8]


def test_overshooting_corridors_lose_their_far_ends():
    # Each corridor runs past the junction with the next one.
    long_column = BoundingBox(1, 1, 1, 9)
    long_row = BoundingBox(0, 9, 8, 8)
    trimmed = trim_untraversed([long_column, long_row, COLUMN_8], ENTRANCE, EXIT)

    assert trimmed == [BoundingBox(1, 1, 1, 8), BoundingBox(1, 8, 8, 8), COLUMN_8]


def test_parallel_overlap_is_kept_whole():
    upper = BoundingBox(1, 6, 1, 3)
    lower = BoundingBox(3, 8, 2, 4)
    trimmed = trim_untraversed([upper, lower], BoundingBox(1, 1, 1, 1), BoundingBox(8, 8, 4, 4))

    assert trimmed == [upper, lower]


def test_regions_are_cut_from_the_ends():
    trimmed = trim_regions([COLUMN_1, ROW_8, COLUMN_8], ENTRANCE, EXIT)

    assert trimmed == [BoundingBox(1, 1, 2, 8), ROW_8, BoundingBox(8, 8, 2, 8)]


def test_region_narrower_than_corridor_cuts_a_band():
    hall = BoundingBox(1, 9, 1, 3)
    trimmed = trim_regions([hall], BoundingBox(1, 1, 2, 2), BoundingBox(9, 9, 1, 1))

    assert trimmed == [BoundingBox(2, 8, 1, 3)]


def test_corridor_inside_region_is_dropped():
    trimmed = trim_regions(
        [BoundingBox(1, 2, 1, 2), BoundingBox(2, 6, 2, 2)],
        BoundingBox(1, 2, 1, 2),
        BoundingBox(6, 6, 2, 2),
    )

    assert trimmed == [BoundingBox(3, 5, 2, 2)]


def test_trim_solution_never_covers_regions():
    solution = trim_solution([COLUMN_1, ROW_8, COLUMN_8], ENTRANCE, EXIT)

    assert solution == [BoundingBox(1, 1, 2, 8), ROW_8, BoundingBox(8, 8, 2, 8)]
    for box in solution:
        assert not box.intersects(ENTRANCE)
        assert not box.intersects(EXIT)


def test_empty_chain():
    assert trim_solution([], ENTRANCE, EXIT) == []
    assert trim_regions([], ENTRANCE, EXIT) == []


def test_far_piece_is_kept_when_no_piece_reaches_a_neighbour():
    # The entrance sits where a side shaft leaves the middle of the row.
    row = BoundingBox(1, 6, 1, 1)
    shaft = BoundingBox(3, 3, 1, 5)

    trimmed = trim_regions([row, shaft], BoundingBox(3, 3, 1, 1), BoundingBox(3, 3, 5, 5))

    assert trimmed == [BoundingBox(4, 6, 1, 1), BoundingBox(3, 3, 2, 4)]
    assert not trimmed[0].intersects(trimmed[1])
