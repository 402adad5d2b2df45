import hashlib

import pytest

from er_save_copy.core.checksum import (
    digest,
    verify_headers_checksum,
    verify_slot_checksum,
    write_digest,
    write_headers_checksum,
    write_slot_checksum,
)
from er_save_copy.core.errors import DigestError, FormatError

from conftest import SOURCE_OWNER, build_save, stored_digest


def test_digest_is_md5():
    assert digest(b"").hex() == "d41d8cd98f00b204e9800998ecf8427e"
    assert digest(b"Elden Ring") == hashlib.md5(b"Elden Ring").digest()
    assert len(digest(bytes(1000))) == 16


def test_digest_failure_raises_digest_error():
    with pytest.raises(DigestError):
        digest("not bytes")


def test_write_digest_stores_in_front_of_range():
    buffer = bytearray(16) + bytearray(b"protected data!!")
    value = write_digest(buffer, 16, 16, 0)

    assert value == hashlib.md5(b"protected data!!").digest()
    assert bytes(buffer[:16]) == value
    assert bytes(buffer[16:]) == b"protected data!!"


def test_write_digest_rejects_overlapping_field():
    buffer = bytearray(64)
    with pytest.raises(FormatError):
        write_digest(buffer, 16, 32, 8)
    assert buffer == bytearray(64)


@pytest.mark.parametrize("start, length, placement", [
    (16, 64, 0),     # range runs past the end
    (-4, 8, 32),     # range starts before the buffer
    (16, 16, 56),    # field runs past the end
    (16, 16, -16),   # field starts before the buffer
])
def test_write_digest_rejects_out_of_bounds(start, length, placement):
    buffer = bytearray(64)
    with pytest.raises(FormatError):
        write_digest(buffer, start, length, placement)


def test_slot_checksum_round_trip(layout):
    buffer = bytearray(build_save(SOURCE_OWNER, {2: ("Melina", 1, 0)}))
    start = layout.slot_offset(2)
    buffer[start + 1] ^= 0xFF
    assert not verify_slot_checksum(buffer, 2, layout)

    value = write_slot_checksum(buffer, 2, layout)

    assert stored_digest(buffer, layout.slot_checksum_offset(2)) == value
    assert verify_slot_checksum(buffer, 2, layout)


def test_headers_checksum_round_trip(layout):
    buffer = bytearray(build_save(SOURCE_OWNER))
    buffer[layout.active_flag_offset(5)] = 0x01
    assert not verify_headers_checksum(buffer, layout)

    write_headers_checksum(buffer, layout)

    assert verify_headers_checksum(buffer, layout)


def test_fresh_container_checksums_are_valid(layout, source_save):
    assert verify_headers_checksum(source_save, layout)
    assert all(verify_slot_checksum(source_save, index, layout) for index in range(10))
