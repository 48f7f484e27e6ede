"""Records whose meaning is not modeled.

Their contents are kept so the cursor stays aligned for the sections that
follow them.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import logging
import struct

import numpy as np
from construct import Struct, Int8ul, Int16ul, Padding

from .base import Record, OpaqueRecord

logger = logging.getLogger(__name__)

class ModelStruct1(OpaqueRecord):
    SIZE = 32

class ModelStruct2(OpaqueRecord):
    SIZE = 20

class ModelStruct3(OpaqueRecord):
    SIZE = 10

class ModelStruct5(OpaqueRecord):
    SIZE = 16

class ModelStruct6(OpaqueRecord):
    SIZE = 12

class ModelStruct7(OpaqueRecord):
    SIZE = 4

@dataclass(frozen=True)
class BoneList(Record):
    """Table of up to 64 bone indices used by a mesh."""
    bones: Tuple[int, ...]
    bone_count: int

    SIZE = 132
    SCHEMA = Struct(
        "bones" / Int16ul[64],
        "bone_count" / Int8ul,
        Padding(3),
    )

    @classmethod
    def from_container(cls, values):
        return cls(bones=tuple(values['bones']), bone_count=values['bone_count'])

    @property
    def active_bones(self) -> Tuple[int, ...]:
        return self.bones[:min(self.bone_count, len(self.bones))]

class BoneIndices:
    """Size-prefixed block of 16-bit bone indices.

    The first four bytes hold the byte length of the index data that
    follows.
    """

    def __init__(self, indices: np.ndarray, size: int):
        self.indices = indices
        self.size = size

    @property
    def consumed(self) -> int:
        return 4 + self.size

    @classmethod
    def read(cls, data: bytes, offset: int) -> Tuple[Optional['BoneIndices'], int]:
        """Decode the block at offset.

        A block whose size prefix or declared data does not fit in the
        buffer is not decoded; None is returned with the offset unchanged.

        Returns:
            Tuple of (BoneIndices or None, next_offset)
        """
        if offset + 4 > len(data):
            logger.debug(f"No room for bone indices size at offset {offset:#x}")
            return None, offset

        size = struct.unpack_from('<I', data, offset)[0]
        if offset + 4 + size > len(data):
            logger.debug(
                f"Bone indices block of {size} bytes at offset {offset:#x} "
                f"exceeds buffer length {len(data)}"
            )
            return None, offset

        indices = np.frombuffer(data, dtype='<u2', count=size // 2, offset=offset + 4)
        block = cls(indices.copy(), size)
        logger.debug(f"Read {len(indices)} bone indices at {offset:#x}")
        return block, offset + block.consumed

    def to_dict(self) -> Dict[str, Any]:
        return {'size': self.size, 'indices': self.indices.tolist()}
