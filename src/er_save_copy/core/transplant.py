"""Copy a character slot from one save container into another.

The operation works on a private copy of the destination buffer and
returns it; nothing the caller holds is modified and nothing is written to
disk here. Persisting the result (after a backup) is the caller's job.
"""

from .checksum import write_headers_checksum, write_slot_checksum
from .errors import DigestError, FormatError
from .layout import ACTIVE_FLAG, ELDEN_RING_LAYOUT, SaveLayout
from .pattern import find_all
from ..logging_config import get_logger

logger = get_logger("transplant")


def read_owner_id(buffer: bytes, layout: SaveLayout = ELDEN_RING_LAYOUT) -> bytes:
    """Return the owner (Steam) id stored in the headers section.

    Raises:
        FormatError: If the buffer is too short to contain it
    """
    end = layout.owner_id_offset + layout.owner_id_length
    if len(buffer) < end:
        raise FormatError(
            f"Save file is 0x{len(buffer):X} bytes, too short for the owner id at 0x{layout.owner_id_offset:X}",
            step="read owner id",
        )
    return bytes(buffer[layout.owner_id_offset:end])


def replace_owner_id(slot_data: bytes, source_owner_id: bytes, target_owner_id: bytes) -> tuple[bytes, list[int]]:
    """Rewrite every occurrence of source_owner_id inside slot_data.

    Offsets are collected before anything is written, so the result does not
    depend on replacement order.

    Returns:
        The rewritten data and the offsets that were replaced
    """
    if len(source_owner_id) != len(target_owner_id):
        raise FormatError(
            f"Owner ids differ in length ({len(source_owner_id)} and {len(target_owner_id)} bytes)",
            step="replace owner id",
        )
    if not source_owner_id:
        raise FormatError("Owner id is empty", step="replace owner id")

    data = bytearray(slot_data)
    locations = list(find_all(slot_data, source_owner_id))
    for location in locations:
        data[location:location + len(target_owner_id)] = target_owner_id
    return bytes(data), locations


def transplant(
    source_buffer: bytes,
    source_slot: int,
    target_buffer: bytes,
    target_slot: int,
    source_owner_id: bytes,
    target_owner_id: bytes,
    layout: SaveLayout = ELDEN_RING_LAYOUT,
) -> bytes:
    """Copy source_slot of source_buffer into target_slot of target_buffer.

    The slot data (with its owner id rewritten) and the slot header are
    copied byte for byte, the destination slot is flagged active and both the
    slot checksum and the headers section checksum are recomputed.

    Args:
        source_buffer: Save file the character comes from
        source_slot: Slot index (0-9) in the source
        target_buffer: Save file the character is copied into
        target_slot: Slot index (0-9) in the destination
        source_owner_id: Owner id of the source file
        target_owner_id: Owner id of the destination file, same length
        layout: Container layout

    Returns:
        The new content of the destination file, same length as target_buffer

    Raises:
        FormatError: Bad index, short buffer or owner id length mismatch
        DigestError: A checksum could not be computed
    """
    layout.check_index(source_slot)
    layout.check_index(target_slot)
    if len(source_owner_id) != len(target_owner_id):
        raise FormatError(
            f"Owner ids differ in length ({len(source_owner_id)} and {len(target_owner_id)} bytes)",
            step="replace owner id",
            slot=source_slot,
        )
    for name, buffer, slot in (("Source", source_buffer, source_slot), ("Destination", target_buffer, target_slot)):
        if len(buffer) < layout.min_length:
            raise FormatError(
                f"{name} save is 0x{len(buffer):X} bytes, expected at least 0x{layout.min_length:X}",
                step="validate",
                slot=slot,
            )

    working = bytearray(target_buffer)

    source_start = layout.slot_offset(source_slot)
    source_data = bytes(source_buffer[source_start:source_start + layout.slot_length])
    header_start = layout.header_offset(source_slot)
    source_header = bytes(source_buffer[header_start:header_start + layout.header_length])

    try:
        slot_data, locations = replace_owner_id(source_data, source_owner_id, target_owner_id)
    except FormatError as e:
        e.slot = source_slot
        raise
    logger.debug(f"Rewrote {len(locations)} owner id occurrence(s) in slot {source_slot + 1}")

    target_start = layout.slot_offset(target_slot)
    working[target_start:target_start + layout.slot_length] = slot_data

    target_header = layout.header_offset(target_slot)
    working[target_header:target_header + layout.header_length] = source_header

    working[layout.active_flag_offset(target_slot)] = ACTIVE_FLAG

    try:
        write_slot_checksum(working, target_slot, layout)
        write_headers_checksum(working, layout)
    except (FormatError, DigestError) as e:
        e.slot = target_slot
        raise

    if len(working) != len(target_buffer):
        raise FormatError("Destination size changed during copy", step="validate", slot=target_slot)

    logger.info(f"Copied slot {source_slot + 1} into slot {target_slot + 1}")
    return bytes(working)
