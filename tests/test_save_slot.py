import pytest

from er_save_copy.core.errors import FormatError
from er_save_copy.core.save_slot import (
    EMPTY_SLOT,
    SaveSlot,
    decode_character_name,
    load_slots,
)

from conftest import SOURCE_OWNER, build_save


def test_active_slot(layout, source_save):
    slot = SaveSlot.from_buffer(source_save, 0, layout)

    assert slot.index == 0
    assert slot.active
    assert slot.character_name == "Tarnished"
    assert slot.display_name == "Tarnished"
    assert slot.character_level == 42
    assert slot.seconds_played == 3723
    assert slot.play_time == "1:02:03"
    assert slot.describe() == "Tarnished (Lv 42, 1:02:03)"


def test_slot_ranges(layout, source_save):
    slot = SaveSlot.from_buffer(source_save, 4, layout)
    slot_start = layout.slot_offset(4)
    header_start = layout.header_offset(4)

    assert slot.slot_data == source_save[slot_start:slot_start + layout.slot_length]
    assert slot.header_data == source_save[header_start:header_start + layout.header_length]


def test_inactive_slot_gets_placeholder_name(layout, source_save):
    slot = SaveSlot.from_buffer(source_save, 3, layout)

    assert not slot.active
    assert slot.character_name == ""
    assert slot.display_name == "Slot 4"
    assert slot.describe() == "Slot 4"


def test_projection_leaves_buffer_untouched(layout, source_save):
    buffer = bytearray(source_save)
    SaveSlot.from_buffer(buffer, 0, layout)
    assert bytes(buffer) == source_save


def test_load_slots(layout, source_save):
    slots = load_slots(source_save, layout)

    assert [slot.index for slot in slots] == list(range(10))
    assert [slot.active for slot in slots] == [True] + [False] * 9
    assert len({slot.id for slot in slots}) == 10


def test_short_buffer_is_a_format_error(layout, source_save):
    short = source_save[:layout.min_length - 1]
    with pytest.raises(FormatError) as excinfo:
        SaveSlot.from_buffer(short, 9, layout)
    assert excinfo.value.slot == 9


def test_minimum_length_buffer_is_accepted(layout, source_save):
    slot = SaveSlot.from_buffer(source_save[:layout.min_length], 9, layout)
    assert slot.index == 9


@pytest.mark.parametrize("index", [-1, 10])
def test_bad_index(layout, source_save, index):
    with pytest.raises(FormatError):
        SaveSlot.from_buffer(source_save, index, layout)


def test_empty_slot_differs_from_slot_zero(layout, source_save):
    slot_zero = SaveSlot.from_buffer(source_save, 0, layout)

    assert EMPTY_SLOT.is_empty
    assert not slot_zero.is_empty
    assert EMPTY_SLOT.id != slot_zero.id
    assert EMPTY_SLOT.display_name == "No slot selected"


def test_name_stops_at_first_nul():
    header = "Ranni".encode("utf-16-le") + b"\x00\x00" + "junk".encode("utf-16-le")
    assert decode_character_name(header, 0x22) == "Ranni"


def test_name_uses_full_field(layout):
    name = "A" * 20
    buffer = build_save(SOURCE_OWNER, {1: (name, 1, 0)})
    # The field holds 0x22 bytes, 17 UTF-16 code units
    assert SaveSlot.from_buffer(buffer, 1, layout).character_name == "A" * 17
