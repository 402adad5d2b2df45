"""MD5 checksums protecting the slot data and headers section.

The game stores the 16 byte MD5 of each protected range immediately before
it. The algorithm is fixed by the file format.
"""

import hashlib

from .errors import DigestError, FormatError
from .layout import CHECKSUM_LENGTH, ELDEN_RING_LAYOUT, SaveLayout


def digest(data: bytes, step: str = "checksum") -> bytes:
    """Return the 16 byte MD5 digest of data.

    step names the operation in the DigestError raised on failure.

    Raises:
        DigestError: If the hash cannot be computed
    """
    try:
        return hashlib.md5(data, usedforsecurity=False).digest()
    except (TypeError, ValueError) as e:
        raise DigestError(f"Failed to compute MD5 hash: {e}", step=step) from e


def write_digest(buffer: bytearray, start: int, length: int, placement: int, step: str = "checksum") -> bytes:
    """Digest buffer[start:start+length] and store it at placement.

    The checksum field must lie inside the buffer and must not overlap the
    range it protects.

    Returns:
        The digest that was written

    Raises:
        FormatError: If the range or the checksum field is out of bounds
        DigestError: If the hash cannot be computed
    """
    end = start + length
    if start < 0 or length < 1 or end > len(buffer):
        raise FormatError(
            f"Checksum range 0x{start:X}-0x{end:X} is outside a buffer of 0x{len(buffer):X} bytes",
            step=step,
        )
    if placement < 0 or placement + CHECKSUM_LENGTH > len(buffer):
        raise FormatError(f"Checksum field at 0x{placement:X} is outside the buffer", step=step)
    if placement < end and start < placement + CHECKSUM_LENGTH:
        raise FormatError(
            f"Checksum field at 0x{placement:X} overlaps the range it protects",
            step=step,
        )

    value = digest(bytes(buffer[start:end]), step)
    buffer[placement:placement + CHECKSUM_LENGTH] = value
    return value


def write_slot_checksum(buffer: bytearray, index: int, layout: SaveLayout = ELDEN_RING_LAYOUT) -> bytes:
    """Recompute the checksum stored in front of a slot's data."""
    layout.check_index(index)
    return write_digest(
        buffer,
        layout.slot_offset(index),
        layout.slot_length,
        layout.slot_checksum_offset(index),
        "slot checksum",
    )


def write_headers_checksum(buffer: bytearray, layout: SaveLayout = ELDEN_RING_LAYOUT) -> bytes:
    """Recompute the checksum stored in front of the headers section."""
    return write_digest(
        buffer,
        layout.headers_section_start,
        layout.headers_section_length,
        layout.headers_checksum_offset,
        "headers checksum",
    )


def verify_slot_checksum(buffer: bytes, index: int, layout: SaveLayout = ELDEN_RING_LAYOUT) -> bool:
    """True if the stored slot checksum matches the slot data."""
    layout.check_index(index)
    start = layout.slot_offset(index)
    stored = bytes(buffer[layout.slot_checksum_offset(index):start])
    return stored == digest(bytes(buffer[start:start + layout.slot_length]))


def verify_headers_checksum(buffer: bytes, layout: SaveLayout = ELDEN_RING_LAYOUT) -> bool:
    """True if the stored headers checksum matches the headers section."""
    start = layout.headers_section_start
    stored = bytes(buffer[layout.headers_checksum_offset:start])
    return stored == digest(bytes(buffer[start:layout.headers_section_end]))
