"""Per-mesh vertex layout declarations."""
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple, Union
import logging

from construct import Struct, Int8ul, Padding

from .base import Record

logger = logging.getLogger(__name__)

class VertexDataType(IntEnum):
    """Encoding of one vertex element."""
    SINGLE3 = 0x02
    SINGLE4 = 0x03
    UINT = 0x05
    BYTE_FLOAT4 = 0x08
    HALF2 = 0x0D
    HALF4 = 0x0E

class VertexAttribute(IntEnum):
    """Semantic of one vertex element."""
    POSITION = 0x00
    BLEND_WEIGHTS = 0x01
    BLEND_INDICES = 0x02
    NORMAL = 0x03
    UV = 0x04
    TANGENT2 = 0x05
    TANGENT1 = 0x06
    COLOR = 0x07

def _enum_or_raw(enum_type, value: int) -> Union[IntEnum, int]:
    try:
        return enum_type(value)
    except ValueError:
        return value

@dataclass(frozen=True)
class VertexFormatElement(Record):
    """One element of a vertex declaration."""
    source_part: int
    offset: int
    data_type: Union[VertexDataType, int]
    attribute: Union[VertexAttribute, int]

    SIZE = 8
    SCHEMA = Struct(
        "source_part" / Int8ul,
        "offset" / Int8ul,
        "data_type" / Int8ul,
        "attribute" / Int8ul,
        Padding(4),
    )

    @classmethod
    def from_container(cls, values):
        values['data_type'] = _enum_or_raw(VertexDataType, values['data_type'])
        values['attribute'] = _enum_or_raw(VertexAttribute, values['attribute'])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source_part': self.source_part,
            'offset': self.offset,
            'data_type': getattr(self.data_type, 'name', self.data_type),
            'attribute': getattr(self.attribute, 'name', self.attribute),
        }

class VertexFormat:
    """Vertex declaration for one mesh.

    Declarations are stored with a fixed stride of 17 element slots; the
    used elements are terminated by a source part of 0xFF.
    """

    MAX_ELEMENTS = 17
    STRIDE = MAX_ELEMENTS * VertexFormatElement.SIZE
    END_MARKER = 0xFF

    def __init__(self, elements: Tuple[VertexFormatElement, ...]):
        self.elements = elements

    @classmethod
    def read(cls, data: bytes, offset: int) -> Tuple['VertexFormat', int]:
        """Decode a declaration at offset.

        Returns:
            Tuple of (VertexFormat, next_offset). The next offset is one
            stride further, clamped to the buffer end.
        """
        elements = []
        pos = offset
        while (len(elements) < cls.MAX_ELEMENTS
               and pos + VertexFormatElement.SIZE <= len(data)
               and data[pos] != cls.END_MARKER):
            element, pos = VertexFormatElement.read(data, pos)
            elements.append(element)

        next_offset = min(offset + cls.STRIDE, len(data))
        return cls(tuple(elements)), next_offset

    def find(self, attribute: VertexAttribute) -> Optional[VertexFormatElement]:
        """Return the first element carrying the given attribute."""
        for element in self.elements:
            if element.attribute == attribute:
                return element
        return None

    def __len__(self):
        return len(self.elements)

    def __repr__(self):
        return f"VertexFormat({len(self.elements)} elements)"

    def to_dict(self) -> Dict[str, Any]:
        return {'elements': [e.to_dict() for e in self.elements]}
