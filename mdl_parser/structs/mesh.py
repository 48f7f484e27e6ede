"""Mesh and mesh part headers."""
from dataclasses import dataclass
from typing import Tuple

from construct import Struct, Int8ul, Int16ul, Int32ul, Padding

from .base import Record

@dataclass(frozen=True)
class MeshHeader(Record):
    """Metadata for one renderable mesh."""
    vertex_count: int
    index_count: int
    material_index: int
    part_index: int
    part_count: int
    bone_list_index: int
    start_index: int
    vertex_buffer_offsets: Tuple[int, int, int]
    vertex_buffer_strides: Tuple[int, int, int]
    vertex_stream_count: int

    SIZE = 36
    SCHEMA = Struct(
        "vertex_count" / Int16ul,
        Padding(2),
        "index_count" / Int32ul,
        "material_index" / Int16ul,
        "part_index" / Int16ul,
        "part_count" / Int16ul,
        "bone_list_index" / Int16ul,
        "start_index" / Int32ul,
        "vertex_buffer_offsets" / Int32ul[3],
        "vertex_buffer_strides" / Int8ul[3],
        "vertex_stream_count" / Int8ul,
    )

    @classmethod
    def from_container(cls, values):
        values['vertex_buffer_offsets'] = tuple(values['vertex_buffer_offsets'])
        values['vertex_buffer_strides'] = tuple(values['vertex_buffer_strides'])
        return cls(**values)

@dataclass(frozen=True)
class MeshPartHeader(Record):
    """Index range of a mesh subdivision and the attributes it toggles on."""
    index_offset: int
    index_count: int
    attribute_mask: int
    bone_start_index: int
    bone_count: int

    SIZE = 16
    SCHEMA = Struct(
        "index_offset" / Int32ul,
        "index_count" / Int32ul,
        "attribute_mask" / Int32ul,
        "bone_start_index" / Int16ul,
        "bone_count" / Int16ul,
    )
