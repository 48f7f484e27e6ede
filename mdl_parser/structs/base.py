"""Base record declarations and bounded readers."""
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar
import logging

from construct import Container, ConstructError, ListContainer, Struct

from ..constants import MAX_COUNT

logger = logging.getLogger(__name__)

class FormatError(Exception):
    """Raised when a model definition buffer is structurally invalid."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

class RangeError(IndexError):
    """Raised when a model quality outside 0-2 is requested."""

R = TypeVar('R', bound='Record')

def _plain(value: Any) -> Any:
    """Strip construct containers down to plain python values."""
    if isinstance(value, ListContainer):
        return [_plain(v) for v in value]
    if isinstance(value, Container):
        return {k: _plain(v) for k, v in value.items() if not k.startswith('_')}
    return value

class Record:
    """Fixed-size record with a declared schema.

    Subclasses declare SCHEMA (a construct Struct) and SIZE, the byte width
    of one record. SIZE is what the bounded reader trusts; tests check it
    against the schema.
    """

    SCHEMA: Struct = None
    SIZE: int = 0

    @classmethod
    def from_container(cls: Type[R], values: Dict[str, Any]) -> R:
        return cls(**values)

    @classmethod
    def from_bytes(cls: Type[R], data: bytes, offset: int = 0) -> R:
        """Decode one record at offset.

        Raises:
            FormatError: If fewer than SIZE bytes remain
        """
        if offset < 0 or offset + cls.SIZE > len(data):
            raise FormatError(
                f"Buffer too small for {cls.__name__} at offset {offset:#x}"
            )
        try:
            values = cls.SCHEMA.parse(data[offset:offset + cls.SIZE])
        except ConstructError as e:
            raise FormatError(f"Failed to decode {cls.__name__} at offset {offset:#x}: {e}") from e
        return cls.from_container(_plain(values))

    @classmethod
    def read(cls: Type[R], data: bytes, offset: int) -> Tuple[R, int]:
        """Decode one record and return it with the advanced offset."""
        return cls.from_bytes(data, offset), offset + cls.SIZE

    def to_dict(self) -> Dict[str, Any]:
        return dict(vars(self))

def read_structures(data: bytes, record_type: Type[R], count: int,
                    offset: int) -> Tuple[List[R], int]:
    """Read count consecutive fixed-size records.

    Counts outside 1..MAX_COUNT yield an empty list and leave the offset
    where it was.

    Args:
        data: Buffer to read from
        record_type: Record subclass to decode
        count: Number of records requested
        offset: Cursor position

    Returns:
        Tuple of (records, next_offset)

    Raises:
        FormatError: If the records would run past the end of the buffer
    """
    if count <= 0 or count > MAX_COUNT:
        return [], offset

    end = offset + record_type.SIZE * count
    if end > len(data):
        raise FormatError(
            f"Buffer too small for {count} structures of type "
            f"{record_type.__name__} at offset {offset:#x}"
        )

    records = []
    for _ in range(count):
        record, offset = record_type.read(data, offset)
        records.append(record)
    return records, offset

class OpaqueRecord(Record):
    """Record whose contents are kept as raw bytes."""

    def __init__(self, data: bytes):
        self.data = data

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0):
        if offset < 0 or offset + cls.SIZE > len(data):
            raise FormatError(
                f"Buffer too small for {cls.__name__} at offset {offset:#x}"
            )
        return cls(bytes(data[offset:offset + cls.SIZE]))

    def __eq__(self, other):
        return type(self) is type(other) and self.data == other.data

    def __repr__(self):
        return f"{self.__class__.__name__}({self.data.hex()})"

    def to_dict(self) -> Dict[str, Any]:
        return {'data': self.data.hex()}
