# hex_dumper/dump.py

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Iterable, Iterator, Optional, TextIO, Tuple

from .logic import (
    DecodeError,
    DumpConfig,
    format_line,
    hex_field_width,
    parse_line,
)

log = logging.getLogger(__name__)

UNBOUNDED = 2**63 - 1


# ---------------- Range ----------------
def stream_length(stream: BinaryIO) -> Optional[int]:
    """Total size of ``stream`` in bytes, or ``None`` when it cannot be known.

    Seekable streams (files, in-memory buffers) are measured by seeking to the
    end and back; pipes and terminals report ``None``.
    """
    if not stream.seekable():
        return None
    pos = stream.tell()
    size = stream.seek(0, io.SEEK_END)
    stream.seek(pos)
    return size

def stop_offset(max_bytes: Optional[int], start_offset: int, length: Optional[int]) -> int:
    """Absolute offset at which the dump stops."""
    if max_bytes is not None:
        return start_offset + max_bytes
    if length is not None:
        return length
    return UNBOUNDED


# ---------------- Reading ----------------
def skip_to(stream: BinaryIO, start_offset: int, chunk_size: int) -> None:
    """Position ``stream`` at ``start_offset``.

    Non-seekable input is read and discarded ``chunk_size`` bytes at a time.
    """
    if start_offset <= 0:
        return
    if stream.seekable():
        log.debug("seeking to offset %d", start_offset)
        stream.seek(start_offset)
        return

    log.debug("discarding %d bytes of unseekable input", start_offset)
    remaining = start_offset
    while remaining > 0:
        chunk = stream.read(min(chunk_size, remaining))
        if not chunk:
            break
        remaining -= len(chunk)

def read_line(stream: BinaryIO, length: int) -> Optional[bytes]:
    """Read up to ``length`` bytes, retrying short reads until end of input.

    Returns ``None`` when the stream is already exhausted, a shorter buffer
    when it ends part way through the line.
    """
    buf = bytearray()
    while len(buf) < length:
        chunk = stream.read(length - len(buf))
        if not chunk:
            break
        buf += chunk
    if not buf:
        return None
    return bytes(buf)


# ---------------- Driver ----------------
def iter_chunks(stream: BinaryIO, config: DumpConfig) -> Iterator[Tuple[int, bytes]]:
    """Yield ``(offset, data)`` for each line's worth of ``stream``."""
    end = stop_offset(config.max_bytes, config.start_offset, stream_length(stream))
    log.debug(
        "dumping from %d to %s (cols=%d, group=%d, little_endian=%s)",
        config.start_offset,
        "end of input" if end == UNBOUNDED else end,
        config.bytes_per_line,
        config.group_size,
        config.little_endian,
    )
    skip_to(stream, config.start_offset, config.bytes_per_line)

    offset = config.start_offset
    while offset < end:
        data = read_line(stream, min(config.bytes_per_line, end - offset))
        if data is None:
            break
        yield offset, data
        offset += len(data)

def iter_lines(stream: BinaryIO, config: DumpConfig) -> Iterator[str]:
    """Yield the rendered lines of the dump of ``stream``, one at a time."""
    width = hex_field_width(config)
    for offset, data in iter_chunks(stream, config):
        yield format_line(offset, data, config, width)

def run(stream: BinaryIO, config: DumpConfig, sink: TextIO) -> int:
    """Write the dump of ``stream`` to ``sink``; return the number of lines written."""
    written = 0
    for line in iter_lines(stream, config):
        sink.write(line + "\n")
        written += 1
    log.debug("wrote %d lines", written)
    return written


# ---------------- Reverse ----------------
def revert(lines: Iterable[str], sink: BinaryIO) -> int:
    """Rebuild binary data from a canonical dump; return the number of bytes written.

    Blank lines are ignored. The first malformed line aborts the run; bytes
    from earlier lines stay on ``sink``.
    """
    written = 0
    for lineno, text in enumerate(lines, start=1):
        if not text.strip():
            continue
        try:
            data = parse_line(text)
        except DecodeError as exc:
            raise DecodeError(f"line {lineno}: {exc}") from exc
        sink.write(data)
        written += len(data)
    log.debug("reverted %d bytes", written)
    return written
