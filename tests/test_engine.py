import random

import pytest

from boxpacker_core import BoxPacker, OversizedBoxError
from boxpacker_core.models import layout_of
from boxpacker_core.validation import layout_flags


def _positions(boxes):
    return {box.key: (box.x, box.y) for box in boxes}


def _random_packer(seed, container_width, count, space_between=0):
    rng = random.Random(seed)
    packer = BoxPacker(container_width, space_between=space_between)
    for idx in range(count):
        packer.add_box(f"box{idx}", rng.randint(1, container_width), rng.randint(1, 40))
    return packer


def test_exact_fit_shares_row_above_widest_box():
    packer = BoxPacker(10)
    packer.add_box("A", 10, 5)
    packer.add_box("B", 5, 3)
    packer.add_box("C", 5, 2)

    packed = packer.pack()

    assert _positions(packed) == {"A": (0, 0), "B": (0, 5), "C": (5, 5)}
    assert packer.get_height() == 8


def test_oversized_box_fails_before_placement():
    packer = BoxPacker(10)
    packer.add_box("small", 3, 3)
    packer.add_box("a", 11, 10)

    with pytest.raises(OversizedBoxError) as excinfo:
        packer.pack()

    assert excinfo.value.key == "a"
    assert excinfo.value.width == 11
    assert "a" in str(excinfo.value)
    assert packer.packed_boxes() == []


def test_padding_offsets_second_column():
    packer = BoxPacker(11, space_between=1)
    packer.add_box("A", 5, 5)
    packer.add_box("B", 5, 5)

    packed = packer.pack()

    assert _positions(packed) == {"A": (0, 0), "B": (6, 0)}
    assert packer.get_height() == 5


def test_padding_pushes_box_to_next_row_when_column_too_narrow():
    packer = BoxPacker(10, space_between=1)
    packer.add_box("A", 5, 5)
    packer.add_box("B", 5, 5)

    packed = packer.pack()

    assert _positions(packed) == {"A": (0, 0), "B": (0, 6)}
    assert packer.get_height() == 11


def test_unfit_region_is_bumped_until_it_merges():
    packer = BoxPacker(10)
    packer.add_box("tall", 4, 5)
    packer.add_box("wide", 7, 1)

    packed = packer.pack()

    assert [box.key for box in packed] == ["wide", "tall"]
    assert _positions(packed) == {"wide": (0, 0), "tall": (0, 1)}
    assert packer.column_map.as_list() == [6, 6, 6, 6, 1, 1, 1, 1, 1, 1]


def test_get_height_triggers_pack():
    packer = BoxPacker(10)
    packer.add_box("A", 10, 5)
    packer.add_box("B", 5, 3)

    assert packer.get_height() == 8
    assert len(packer.packed_boxes()) == 2


def test_empty_packer():
    packer = BoxPacker(10)
    assert packer.pack() == []
    assert packer.get_height() == 0


def test_pack_is_not_repeated_once_done():
    packer = BoxPacker(10)
    packer.add_box("A", 6, 4)
    packer.add_box("B", 4, 2)

    first = _positions(packer.pack())
    height = packer.get_height()

    assert _positions(packer.pack()) == first
    assert packer.get_height() == height


def test_boxes_added_after_pack_are_packed_on_next_call():
    packer = BoxPacker(10)
    packer.add_box("A", 10, 5)
    packer.pack()
    packer.add_box("B", 10, 2)

    assert packer.get_height() == 7
    assert _positions(packer.packed_boxes()) == {"A": (0, 0), "B": (0, 5)}


def test_changing_container_width_repacks():
    packer = BoxPacker(10)
    packer.add_box("A", 5, 5)
    packer.add_box("B", 5, 5)
    assert packer.get_height() == 5

    packer.container_width = 5

    assert packer.packed_boxes() == []
    assert packer.get_height() == 10


def test_configure_sets_padding_and_resets():
    packer = BoxPacker(10)
    packer.add_box("A", 5, 5)
    packer.add_box("B", 5, 5)
    packer.pack()

    packer.configure(11, space_between=1)

    assert packer.space_between == 1
    assert _positions(packer.pack()) == {"A": (0, 0), "B": (6, 0)}


def test_reset_keeps_boxes():
    packer = BoxPacker(10)
    packer.add_box("A", 5, 5)
    packer.pack()

    packer.reset()

    assert packer.packed_boxes() == []
    assert [box.key for box in packer.boxes()] == ["A"]
    assert packer.get_height() == 5


@pytest.mark.parametrize("width,space_between", [(0, 0), (-3, 0), (10, -1), (10.5, 0)])
def test_invalid_configuration(width, space_between):
    with pytest.raises(ValueError):
        BoxPacker(width, space_between=space_between)


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("space_between", [0, 2])
def test_random_sets_are_complete_and_non_overlapping(seed, space_between):
    packer = _random_packer(seed, container_width=64, count=30, space_between=space_between)

    packed = packer.pack()

    assert layout_flags(layout_of(packed), 64, expected_count=30) == set()
    assert all(box.x >= 0 and box.x + box.width <= 64 for box in packed)
