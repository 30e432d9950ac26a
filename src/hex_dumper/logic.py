# hex_dumper/logic.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

DEFAULT_BYTES_PER_LINE = 16
DEFAULT_GROUP_SIZE = 2
DEFAULT_GROUP_SIZE_LITTLE_ENDIAN = 4
OFFSET_WIDTH = 10  # "00000000: "
PRINTABLE_MIN = 32
PRINTABLE_MAX = 126

_OFFSET_RE = re.compile(r"[0-9A-Fa-f]{8}: ")
_HEX_RE = re.compile(r"(?:[0-9A-Fa-f]{2})*")


class ConfigurationError(ValueError):
    """Invalid dump configuration (grouping, width or range)."""


class DecodeError(ValueError):
    """A line of a hex dump could not be turned back into bytes."""


# ---------------- Value logic ----------------
def parse_int_maybe(text: str) -> int:
    """Parse an integer accepting 0x/0b/0o prefixes or decimal."""
    s = text.strip().replace("_", "")
    if not s:
        raise ValueError("Enter a number (e.g., 1234 or 0x4D2).")
    return int(s, 0)

def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, 8, ... (exactly one bit set)."""
    return n > 0 and (n & (n - 1)) == 0

def _largest_power_of_two(limit: int) -> int:
    return 1 << (limit.bit_length() - 1)


# ---------------- Configuration ----------------
def resolve_group_size(group_size: Optional[int], bytes_per_line: int, little_endian: bool) -> int:
    """Normalize a requested group size against the line width and endianness.

    ``None`` means the user did not ask for a grouping:
      - big-endian falls back to ``DEFAULT_GROUP_SIZE`` (2)
      - little-endian falls back to ``DEFAULT_GROUP_SIZE_LITTLE_ENDIAN`` (4),
        and so does an explicit 2, matching ``xxd -e``
    Negative sizes mean the default, zero means one group per line and sizes
    wider than the line are clamped. Little-endian words must be a power of
    two wide, and stay one after clamping.
    """
    if little_endian:
        if group_size is not None and not is_power_of_two(group_size):
            raise ConfigurationError(
                "number of octets per group must be a power of 2 in little-endian mode"
            )
        if group_size is None or group_size == DEFAULT_GROUP_SIZE:
            group_size = DEFAULT_GROUP_SIZE_LITTLE_ENDIAN
        if group_size > bytes_per_line:
            return _largest_power_of_two(bytes_per_line)
        return group_size

    if group_size is None or group_size < 0:
        return DEFAULT_GROUP_SIZE
    if group_size == 0:
        return bytes_per_line
    if group_size > bytes_per_line:
        return bytes_per_line
    return group_size


@dataclass(frozen=True)
class DumpConfig:
    bytes_per_line: int = DEFAULT_BYTES_PER_LINE
    group_size: int = DEFAULT_GROUP_SIZE
    little_endian: bool = False
    max_bytes: Optional[int] = None
    start_offset: int = 0

    def __post_init__(self) -> None:
        if self.bytes_per_line < 1:
            raise ConfigurationError(f"bytes per line must be at least 1, got {self.bytes_per_line}")
        if self.group_size < 1:
            raise ConfigurationError(f"group size must be at least 1, got {self.group_size}")
        if self.little_endian and not is_power_of_two(self.group_size):
            raise ConfigurationError(
                "number of octets per group must be a power of 2 in little-endian mode"
            )
        if self.max_bytes is not None and self.max_bytes < 0:
            raise ConfigurationError(f"byte limit must not be negative, got {self.max_bytes}")
        if self.start_offset < 0:
            raise ConfigurationError(f"start offset must not be negative, got {self.start_offset}")

    @classmethod
    def create(
        cls,
        *,
        bytes_per_line: int = DEFAULT_BYTES_PER_LINE,
        group_size: Optional[int] = None,
        little_endian: bool = False,
        max_bytes: Optional[int] = None,
        start_offset: int = 0,
    ) -> "DumpConfig":
        """Resolve the requested grouping; the constructor validates the rest."""
        if bytes_per_line < 1:
            raise ConfigurationError(f"bytes per line must be at least 1, got {bytes_per_line}")
        return cls(
            bytes_per_line=bytes_per_line,
            group_size=resolve_group_size(group_size, bytes_per_line, little_endian),
            little_endian=little_endian,
            max_bytes=max_bytes,
            start_offset=start_offset,
        )


# ---------------- Line formatting ----------------
def format_offset(offset: int) -> str:
    return f"{offset:08x}: "

def hex_big_endian(data: bytes, group_size: int) -> str:
    """Bytes in stream order, a space after every ``group_size``-th byte."""
    parts: list[str] = []
    for i, b in enumerate(data):
        parts.append(f"{b:02x}")
        if (i + 1) % group_size == 0:
            parts.append(" ")
    return "".join(parts)

def hex_little_endian(data: bytes, group_size: int) -> str:
    """Each group byte-reversed, a short final group left-padded."""
    parts: list[str] = []
    for start in range(0, len(data), group_size):
        group = data[start:start + group_size]
        # missing bytes are the most significant end of the word
        parts.append("  " * (group_size - len(group)))
        parts.append(group[::-1].hex())
        parts.append(" ")
    return "".join(parts)

def hex_field_width(config: DumpConfig) -> int:
    """
    Column at which the ASCII field starts, counted from the start of the line.

    Big-endian:     offset + 2 digits per byte + one space per (possibly
                    partial) group + one separator before the ASCII field.
    Little-endian:  offset + every group printed as a full word plus its
                    space + two separators, as ``xxd -e`` does.

    For cols=11, group=5 (big-endian):
        10 + 22 + 3 + 1 = 36
    """
    cols, group = config.bytes_per_line, config.group_size
    num_groups = (cols + group - 1) // group
    if config.little_endian:
        return OFFSET_WIDTH + num_groups * (group * 2 + 1) + 2
    return OFFSET_WIDTH + cols * 2 + num_groups + 1

def bytes_to_ascii(data: Iterable[int]) -> str:
    """Printable ASCII as-is, everything else as '.'."""
    return "".join(chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else "." for b in data)

def format_line(offset: int, data: bytes, config: DumpConfig, width: Optional[int] = None) -> str:
    """Render one line of the dump (without the trailing newline).

    ``width`` is the precomputed :func:`hex_field_width`; the driver passes it
    so it is derived once per dump rather than once per line.
    """
    if width is None:
        width = hex_field_width(config)
    if config.little_endian:
        hex_text = hex_little_endian(data, config.group_size)
    else:
        hex_text = hex_big_endian(data, config.group_size)
    return (format_offset(offset) + hex_text).ljust(width) + bytes_to_ascii(data)


# ---------------- Reverse ----------------
def parse_line(text: str) -> bytes:
    """Decode one line of a canonical (16 columns, groups of 2, big-endian) dump.

    The offset field is checked but otherwise ignored; the hex field ends at
    the first double space and the ASCII field after it is dropped.
    """
    line = text.rstrip("\r\n")
    if not _OFFSET_RE.match(line):
        raise DecodeError(f"expected an 8-digit offset field, got {line[:OFFSET_WIDTH]!r}")
    hex_text = line[OFFSET_WIDTH:].split("  ", 1)[0].replace(" ", "")
    if len(hex_text) % 2 != 0:
        raise DecodeError(f"odd number of hex digits: {hex_text!r}")
    if not _HEX_RE.fullmatch(hex_text):
        raise DecodeError(f"invalid hex digits: {hex_text!r}")
    return bytes.fromhex(hex_text)
