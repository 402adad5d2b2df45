"""Read-only view of one character slot inside a save container."""

import struct
import uuid
from dataclasses import dataclass, field

from .errors import FormatError
from .layout import ACTIVE_FLAG, ELDEN_RING_LAYOUT, SaveLayout

# Identity of "no slot selected"
EMPTY_SLOT_ID = uuid.UUID(int=0)


def decode_character_name(header_data: bytes, name_length: int) -> str:
    """Decode the UTF-16LE character name at the start of a slot header."""
    raw = bytes(header_data[:name_length])
    if len(raw) % 2:
        raw = raw[:-1]
    return raw.decode("utf-16-le", errors="replace").split("\0", 1)[0]


@dataclass(frozen=True)
class SaveSlot:
    """One of the ten character slots of a save file.

    Records are projections of a container buffer. They are rebuilt after
    every load or write and never written back themselves; in particular the
    "Slot N" placeholder shown for empty slots exists only for display.
    """
    index: int
    slot_data: bytes = field(repr=False)
    header_data: bytes = field(repr=False)
    active: bool
    character_name: str
    character_level: int = 0
    seconds_played: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    @classmethod
    def from_buffer(cls, buffer: bytes, index: int, layout: SaveLayout = ELDEN_RING_LAYOUT) -> "SaveSlot":
        """Slice slot, header and active flag for index out of buffer.

        Raises:
            FormatError: If index is out of range or the buffer is too short
        """
        layout.check_index(index)
        if len(buffer) < layout.min_length:
            raise FormatError(
                f"Save file is 0x{len(buffer):X} bytes, expected at least 0x{layout.min_length:X}",
                step="read slot",
                slot=index,
            )

        slot_start = layout.slot_offset(index)
        header_start = layout.header_offset(index)
        slot_data = bytes(buffer[slot_start:slot_start + layout.slot_length])
        header_data = bytes(buffer[header_start:header_start + layout.header_length])
        active = buffer[layout.active_flag_offset(index)] == ACTIVE_FLAG

        played = layout.played_location
        (seconds_played,) = struct.unpack_from("<I", header_data, played)

        return cls(
            index=index,
            slot_data=slot_data,
            header_data=header_data,
            active=active,
            character_name=decode_character_name(header_data, layout.name_length),
            character_level=header_data[layout.level_location],
            seconds_played=seconds_played,
        )

    @property
    def is_empty(self) -> bool:
        """True for the "nothing selected" sentinel."""
        return self.id == EMPTY_SLOT_ID

    @property
    def display_name(self) -> str:
        """Name shown in slot lists."""
        if self.is_empty:
            return "No slot selected"
        if not self.active:
            return f"Slot {self.index + 1}"
        return self.character_name or f"Slot {self.index + 1}"

    @property
    def play_time(self) -> str:
        """Seconds played formatted as H:MM:SS."""
        minutes, seconds = divmod(self.seconds_played, 60)
        hours, minutes = divmod(minutes, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}"

    def describe(self) -> str:
        """Longer label with level and play time for active slots."""
        if not self.active:
            return self.display_name
        return f"{self.display_name} (Lv {self.character_level}, {self.play_time})"


EMPTY_SLOT = SaveSlot(
    index=-1,
    slot_data=b"",
    header_data=b"",
    active=False,
    character_name="",
    id=EMPTY_SLOT_ID,
)


def load_slots(buffer: bytes, layout: SaveLayout = ELDEN_RING_LAYOUT) -> list[SaveSlot]:
    """Build the records for every slot of a container."""
    return [SaveSlot.from_buffer(buffer, index, layout) for index in range(layout.slot_count)]
