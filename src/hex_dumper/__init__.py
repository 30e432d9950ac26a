# hex_dumper/__init__.py

"""Hex Dumper package.

Re-exports the formatting engine for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .logic import (
    DEFAULT_BYTES_PER_LINE,
    DEFAULT_GROUP_SIZE,
    DEFAULT_GROUP_SIZE_LITTLE_ENDIAN,
    OFFSET_WIDTH,
    PRINTABLE_MIN,
    PRINTABLE_MAX,
    ConfigurationError,
    DecodeError,
    DumpConfig,
    bytes_to_ascii,
    format_line,
    hex_field_width,
    is_power_of_two,
    parse_int_maybe,
    parse_line,
    resolve_group_size,
)

from .dump import (
    UNBOUNDED,
    iter_chunks,
    iter_lines,
    read_line,
    revert,
    run,
    skip_to,
    stop_offset,
    stream_length,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Logic
    "DEFAULT_BYTES_PER_LINE", "DEFAULT_GROUP_SIZE", "DEFAULT_GROUP_SIZE_LITTLE_ENDIAN",
    "OFFSET_WIDTH", "PRINTABLE_MIN", "PRINTABLE_MAX",
    "ConfigurationError", "DecodeError", "DumpConfig",
    "bytes_to_ascii", "format_line", "hex_field_width", "is_power_of_two",
    "parse_int_maybe", "parse_line", "resolve_group_size",
    # Driver
    "UNBOUNDED", "iter_chunks", "iter_lines", "read_line", "revert", "run",
    "skip_to", "stop_offset", "stream_length",
]
