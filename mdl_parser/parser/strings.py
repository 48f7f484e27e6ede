"""Strings section discovery and string table resolution."""
from dataclasses import dataclass
from typing import List, Tuple
import logging
import struct

import numpy as np

from ..constants import (
    STRINGS_SCAN_ALIGNMENT,
    STRINGS_MAX_COUNT,
    STRINGS_SAMPLE_SIZE,
    STRINGS_MIN_TERMINATORS,
    STRINGS_PRINTABLE_RATIO,
    STRINGS_TEXT_RATIO,
)
from ..structs.base import FormatError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class StringsSection:
    """Location of the string data block"""
    offset: int   # Absolute offset of the first string byte
    size: int
    count: int

    @property
    def end(self) -> int:
        return self.offset + self.size

def looks_like_strings(data: bytes, offset: int, size: int) -> bool:
    """Check whether a block reads like packed null-terminated text.

    Only the first STRINGS_SAMPLE_SIZE bytes are sampled.
    """
    if offset + size > len(data):
        return False

    sample = np.frombuffer(data, dtype=np.uint8,
                           count=min(size, STRINGS_SAMPLE_SIZE), offset=offset)
    total = len(sample)
    terminators = int(np.count_nonzero(sample == 0))
    printable = int(np.count_nonzero((sample >= 0x20) & (sample < 0x7F)))

    return (terminators >= STRINGS_MIN_TERMINATORS
            and printable > total * STRINGS_PRINTABLE_RATIO
            and (printable + terminators) > total * STRINGS_TEXT_RATIO)

def find_strings_section(data: bytes) -> StringsSection:
    """Locate the (count, size, data) triple of the strings section.

    Scans 4-byte aligned offsets from the start and returns the first
    candidate whose data passes looks_like_strings.

    Raises:
        FormatError: If no candidate matches
    """
    length = len(data)
    for pos in range(0, length - 8, STRINGS_SCAN_ALIGNMENT):
        count, size = struct.unpack_from('<ii', data, pos)

        if not (0 < count < STRINGS_MAX_COUNT):
            continue
        if not (0 < size < length) or pos + 8 + size > length:
            continue
        if looks_like_strings(data, pos + 8, size):
            logger.debug(f"Strings section at {pos + 8:#x}: {count} strings, {size} bytes")
            return StringsSection(offset=pos + 8, size=size, count=count)

    raise FormatError("Could not find strings section in model file")

def read_string(data: bytes, offset: int) -> str:
    """Read a null-terminated string, stopping at the buffer end if unterminated."""
    end = data.find(b'\0', offset)
    if end == -1:
        end = len(data)
    return data[offset:end].decode('utf-8', 'replace')

def read_strings(data: bytes, count: int, offset: int,
                 base_offset: int) -> Tuple[List[str], int]:
    """Resolve a table of relative string offsets.

    Each entry is a 4-byte offset relative to base_offset. Entries that
    point outside the buffer resolve to an empty string; a table cut short
    by the buffer end yields only the entries that were read.

    Returns:
        Tuple of (strings, next_offset)
    """
    if count <= 0:
        return [], offset

    values = []
    for i in range(count):
        if offset + 4 > len(data):
            logger.warning(f"String table truncated after {i} of {count} entries")
            break

        string_offset = struct.unpack_from('<i', data, offset)[0]
        if string_offset < 0 or base_offset + string_offset >= len(data):
            values.append('')
        else:
            values.append(read_string(data, base_offset + string_offset))
        offset += 4

    return values, offset
