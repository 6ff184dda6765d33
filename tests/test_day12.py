from adventpuzzles.day12 import (
    bulk_fence_price,
    corner_count,
    fence_price,
    find_regions,
)

LARGE = [
    "RRRRIICCFF",
    "RRRRIICCCF",
    "VVRRRCCFFF",
    "VVRCCCJFFF",
    "VVVVCJJCFE",
    "VVIVCCJJEE",
    "VVIIICJJEE",
    "MIIIIIJJEE",
    "MIIISIJEEE",
    "MMMISSJEEE",
]

SMALL = ["AAAA", "BBCD", "BBCC", "EEEC"]


def test_fence_price_worked_example():
    assert fence_price(LARGE) == 1930


def test_bulk_fence_price_worked_example():
    assert bulk_fence_price(LARGE) == 1206


def test_small_example_prices():
    assert fence_price(SMALL) == 140
    assert bulk_fence_price(SMALL) == 80


def test_regions_cover_grid_without_overlap():
    regions = find_regions(LARGE)
    cells = [cell for region in regions for cell in region]
    assert len(cells) == len(set(cells)) == sum(len(row) for row in LARGE)


def test_each_region_holds_one_plant():
    for region in find_regions(LARGE):
        plants = {LARGE[y][x] for x, y in region}
        assert len(plants) == 1


def test_same_plant_in_separate_places_gives_separate_regions():
    regions = find_regions(["ABA"])
    assert len(regions) == len("ABA")
    assert frozenset({(0, 0)}) in regions and frozenset({(2, 0)}) in regions


def test_single_cell_has_four_corners():
    assert corner_count({(0, 0)}, (0, 0)) == 4


def test_rectangle_has_as_many_corners_as_a_single_cell():
    rectangle = {(x, y) for x in range(3) for y in range(2)}
    total = sum(corner_count(rectangle, cell) for cell in rectangle)
    assert total == corner_count({(5, 5)}, (5, 5))


def test_bulk_price_never_exceeds_plain_price():
    for grid in (LARGE, SMALL, ["AB", "BA"]):
        assert bulk_fence_price(grid) <= fence_price(grid)