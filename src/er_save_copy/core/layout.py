"""Fixed layout of the Elden Ring save container (ER0000.sl2 / ER0000.co2).

The container is a BND4 archive of fixed size. Only the regions touched by a
slot copy are described here:

    0x300       MD5 of slot 0 data
    0x310       slot 0 data (0x280000 bytes)
    ...         slots 1-9, each preceded by its own 16 byte MD5
    0x19003A0   MD5 of the headers section
    0x19003B0   headers section (0x60000 bytes) containing
                  0x19003B4  owner Steam ID (8 bytes, little endian)
                  0x1901D04  ten active flags, one byte per slot
                  0x1901D0E  ten slot headers of 0x24C bytes

Slot header layout:
    0x00  character name, UTF-16LE, 0x22 bytes
    0x22  character level (one byte)
    0x26  seconds played (uint32, little endian)

These values must match the game's format exactly; they are checked against
real save files and are not derived from anything at runtime.
"""

from dataclasses import dataclass

from .errors import FormatError

SLOT_COUNT = 10
CHECKSUM_LENGTH = 0x10

SLOT_START_INDEX = 0x310
SLOT_LENGTH = 0x280000
SLOT_PADDING = 0x10

SAVE_HEADERS_SECTION_START_INDEX = 0x19003B0
SAVE_HEADERS_SECTION_LENGTH = 0x60000
SAVE_HEADER_START_INDEX = 0x1901D0E
SAVE_HEADER_LENGTH = 0x24C
CHAR_ACTIVE_STATUS_START_INDEX = 0x1901D04

CHAR_NAME_LENGTH = 0x22
CHAR_LEVEL_LOCATION = 0x22
CHAR_PLAYED_START_INDEX = 0x26

OWNER_ID_OFFSET = 0x19003B4
OWNER_ID_LENGTH = 8

ACTIVE_FLAG = 0x01


@dataclass(frozen=True)
class SaveLayout:
    """Offsets and lengths of one container layout.

    The defaults describe the Elden Ring container. The geometry is checked
    on construction so a bad layout fails before any save is touched.
    """
    slot_count: int = SLOT_COUNT
    slot_start: int = SLOT_START_INDEX
    slot_length: int = SLOT_LENGTH
    slot_padding: int = SLOT_PADDING
    headers_section_start: int = SAVE_HEADERS_SECTION_START_INDEX
    headers_section_length: int = SAVE_HEADERS_SECTION_LENGTH
    header_start: int = SAVE_HEADER_START_INDEX
    header_length: int = SAVE_HEADER_LENGTH
    active_status_start: int = CHAR_ACTIVE_STATUS_START_INDEX
    owner_id_offset: int = OWNER_ID_OFFSET
    owner_id_length: int = OWNER_ID_LENGTH
    name_length: int = CHAR_NAME_LENGTH
    level_location: int = CHAR_LEVEL_LOCATION
    played_location: int = CHAR_PLAYED_START_INDEX

    def __post_init__(self):
        self._validate()

    @property
    def slot_stride(self) -> int:
        """Distance between the starts of two consecutive slots."""
        return self.slot_padding + self.slot_length

    @property
    def headers_checksum_offset(self) -> int:
        return self.headers_section_start - CHECKSUM_LENGTH

    @property
    def headers_section_end(self) -> int:
        return self.headers_section_start + self.headers_section_length

    @property
    def min_length(self) -> int:
        """Smallest buffer that holds every region of every slot."""
        last = self.slot_count - 1
        return max(
            self.slot_offset(last) + self.slot_length,
            self.header_offset(last) + self.header_length,
            self.active_flag_offset(last) + 1,
            self.owner_id_offset + self.owner_id_length,
            self.headers_section_end,
        )

    def check_index(self, index: int) -> None:
        """Raise FormatError unless index addresses a slot."""
        if not 0 <= index < self.slot_count:
            raise FormatError(
                f"Slot index {index} is outside 0-{self.slot_count - 1}",
                step="slot lookup",
            )

    def slot_offset(self, index: int) -> int:
        return self.slot_start + index * self.slot_stride

    def slot_checksum_offset(self, index: int) -> int:
        return self.slot_offset(index) - CHECKSUM_LENGTH

    def header_offset(self, index: int) -> int:
        return self.header_start + index * self.header_length

    def active_flag_offset(self, index: int) -> int:
        return self.active_status_start + index

    def _validate(self) -> None:
        if self.slot_count < 1 or self.slot_length < 1 or self.header_length < 1:
            raise FormatError("Layout has an empty slot table")
        if self.slot_padding < CHECKSUM_LENGTH:
            raise FormatError("Slot padding cannot hold a checksum")
        if self.slot_checksum_offset(0) < 0:
            raise FormatError("First slot checksum lies before the start of the file")
        last_slot_end = self.slot_offset(self.slot_count - 1) + self.slot_length
        if last_slot_end > self.headers_checksum_offset:
            raise FormatError("Slot table overlaps the headers section checksum")

        section = range(self.headers_section_start, self.headers_section_end + 1)
        header_table_end = self.header_offset(self.slot_count)
        flags_end = self.active_flag_offset(self.slot_count)
        owner_end = self.owner_id_offset + self.owner_id_length
        for name, start, end in (
            ("Header table", self.header_start, header_table_end),
            ("Active flag table", self.active_status_start, flags_end),
            ("Owner id", self.owner_id_offset, owner_end),
        ):
            if start not in section or end not in section:
                raise FormatError(f"{name} lies outside the headers section")

        if self.played_location + 4 > self.header_length or self.name_length > self.header_length:
            raise FormatError("Header fields do not fit in a slot header")


ELDEN_RING_LAYOUT = SaveLayout()
