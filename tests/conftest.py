"""Shared fixtures: compact synthetic save containers.

Real saves are about 27 MB, so most tests use SMALL_LAYOUT, a container with
the same structure (ten slots, MD5 fields, headers section holding the owner
id, active flags and slot headers) shrunk to a few hundred bytes.
"""

import hashlib
import struct
from datetime import datetime, timedelta

import pytest

from er_save_copy.core.backup_manager import BackupManager
from er_save_copy.core.copy_session import CopySession
from er_save_copy.core.layout import CHECKSUM_LENGTH, SaveLayout

SMALL_LAYOUT = SaveLayout(
    slot_count=10,
    slot_start=0x20,
    slot_length=0x40,
    slot_padding=0x10,
    headers_section_start=0x340,
    headers_section_length=0x200,
    header_start=0x360,
    header_length=0x30,
    active_status_start=0x350,
    owner_id_offset=0x344,
    owner_id_length=8,
    name_length=0x22,
    level_location=0x22,
    played_location=0x26,
)

# Room for a region after the headers section that copies never touch
FILE_LENGTH = 0x600

SOURCE_OWNER = struct.pack("<Q", 76561198000000001)
TARGET_OWNER = struct.pack("<Q", 76561198000000002)

# Where build_save embeds the owner id inside an active slot
OWNER_OFFSETS_IN_SLOT = (0x04, 0x20)


def build_save(owner_id, characters=None, layout=SMALL_LAYOUT, length=FILE_LENGTH):
    """Build a container with valid checksums.

    Args:
        owner_id: Owner id stored in the headers section and in every active slot
        characters: {slot index: (name, level, seconds played)} of active slots
        layout: Container layout
        length: Total file length
    """
    data = bytearray(length)

    for index in range(layout.slot_count):
        start = layout.slot_offset(index)
        data[start:start + layout.slot_length] = bytes([0x30 + index]) * layout.slot_length

    data[layout.owner_id_offset:layout.owner_id_offset + len(owner_id)] = owner_id

    for index, (name, level, seconds) in (characters or {}).items():
        start = layout.slot_offset(index)
        for offset in OWNER_OFFSETS_IN_SLOT:
            data[start + offset:start + offset + len(owner_id)] = owner_id

        header = layout.header_offset(index)
        encoded = name.encode("utf-16-le")[:layout.name_length]
        data[header:header + len(encoded)] = encoded
        data[header + layout.level_location] = level
        struct.pack_into("<I", data, header + layout.played_location, seconds)
        data[layout.active_flag_offset(index)] = 0x01

    for index in range(layout.slot_count):
        start = layout.slot_offset(index)
        data[start - CHECKSUM_LENGTH:start] = hashlib.md5(data[start:start + layout.slot_length]).digest()

    section = layout.headers_section_start
    data[section - CHECKSUM_LENGTH:section] = hashlib.md5(
        data[section:section + layout.headers_section_length]
    ).digest()

    return bytes(data)


def stored_digest(buffer, placement):
    return bytes(buffer[placement:placement + CHECKSUM_LENGTH])


@pytest.fixture
def layout():
    return SMALL_LAYOUT


@pytest.fixture
def source_save():
    """Source container with a single character in slot 0."""
    return build_save(SOURCE_OWNER, {0: ("Tarnished", 42, 3723)})


@pytest.fixture
def target_save():
    """Destination container owned by another account, no characters."""
    return build_save(TARGET_OWNER)


@pytest.fixture
def clock():
    """Deterministic clock advancing one second per call."""
    moments = (datetime(2026, 1, 16, 14, 30, 52) + timedelta(seconds=n) for n in range(1000))
    return lambda: next(moments)


@pytest.fixture
def save_files(tmp_path, source_save, target_save):
    """Source and destination saves written to separate folders."""
    source_dir = tmp_path / "source"
    target_dir = tmp_path / "target"
    source_dir.mkdir()
    target_dir.mkdir()

    source_path = source_dir / "ER0000.sl2"
    target_path = target_dir / "ER0000.sl2"
    source_path.write_bytes(source_save)
    target_path.write_bytes(target_save)
    return source_path, target_path


@pytest.fixture
def session(tmp_path, clock):
    """Copy session on the small layout with backups under tmp_path."""
    backup_manager = BackupManager(tmp_path / "backups", max_backups=3, clock=clock)
    return CopySession(backup_manager, remove_game_backup=True, layout=SMALL_LAYOUT)
