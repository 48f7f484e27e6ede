"""Model definition header and per-quality model headers."""
from dataclasses import dataclass
from typing import Tuple

from construct import Struct, Float32l, Int8ul, Int16sl, Int16ul, Int32ul

from .base import Record, FormatError
from ..constants import MAX_COUNT

@dataclass(frozen=True)
class ModelDefinitionHeader(Record):
    """Fixed header following the strings section.

    Counts are signed on disk so corrupt values show up as negatives
    instead of huge unsigned numbers.
    """
    radius: float
    mesh_count: int
    attribute_count: int
    part_count: int
    material_count: int
    bone_count: int
    bone_list_count: int          # unknown struct 4
    unknown_struct5_count: int
    unknown_struct6_count: int
    unknown_struct7_count: int
    unknown2: int
    unknown_struct1_count: int
    unknown_struct2_count: int
    unknown3: int
    unknown4: Tuple[int, ...]
    unknown_struct3_count: int
    unknown5: Tuple[int, ...]

    SIZE = 56
    SCHEMA = Struct(
        "radius" / Float32l,
        "mesh_count" / Int16sl,
        "attribute_count" / Int16sl,
        "part_count" / Int16sl,
        "material_count" / Int16sl,
        "bone_count" / Int16sl,
        "bone_list_count" / Int16sl,
        "unknown_struct5_count" / Int16sl,
        "unknown_struct6_count" / Int16sl,
        "unknown_struct7_count" / Int16sl,
        "unknown2" / Int16ul,
        "unknown_struct1_count" / Int16sl,
        "unknown_struct2_count" / Int8ul,
        "unknown3" / Int8ul,
        "unknown4" / Int16ul[5],
        "unknown_struct3_count" / Int16sl,
        "unknown5" / Int16ul[8],
    )

    # Counts that size named arrays; each must sit in 0..MAX_COUNT
    VALIDATED_COUNTS = (
        'mesh_count',
        'attribute_count',
        'part_count',
        'material_count',
        'bone_count',
    )

    @classmethod
    def from_container(cls, values):
        values['unknown4'] = tuple(values['unknown4'])
        values['unknown5'] = tuple(values['unknown5'])
        return cls(**values)

    def validate(self) -> None:
        """Check the counts that size later reads.

        Raises:
            FormatError: Naming the first count that is negative or above
                MAX_COUNT
        """
        for name in self.VALIDATED_COUNTS:
            value = getattr(self, name)
            if value < 0 or value > MAX_COUNT:
                raise FormatError(f"Invalid {name}: {value}")

@dataclass(frozen=True)
class ModelHeader(Record):
    """Per-quality mesh range and buffer layout."""
    mesh_index: int
    mesh_count: int
    model_lod_range: float
    texture_lod_range: float
    water_mesh_index: int
    water_mesh_count: int
    shadow_mesh_index: int
    shadow_mesh_count: int
    terrain_shadow_mesh_index: int
    terrain_shadow_mesh_count: int
    vertical_fog_mesh_index: int
    vertical_fog_mesh_count: int
    edge_geometry_size: int
    edge_geometry_offset: int
    polygon_count: int
    unknown1: int
    vertex_buffer_size: int
    index_buffer_size: int
    vertex_data_offset: int
    index_data_offset: int

    SIZE = 60
    SCHEMA = Struct(
        "mesh_index" / Int16ul,
        "mesh_count" / Int16ul,
        "model_lod_range" / Float32l,
        "texture_lod_range" / Float32l,
        "water_mesh_index" / Int16ul,
        "water_mesh_count" / Int16ul,
        "shadow_mesh_index" / Int16ul,
        "shadow_mesh_count" / Int16ul,
        "terrain_shadow_mesh_index" / Int16ul,
        "terrain_shadow_mesh_count" / Int16ul,
        "vertical_fog_mesh_index" / Int16ul,
        "vertical_fog_mesh_count" / Int16ul,
        "edge_geometry_size" / Int32ul,
        "edge_geometry_offset" / Int32ul,
        "polygon_count" / Int32ul,
        "unknown1" / Int32ul,
        "vertex_buffer_size" / Int32ul,
        "index_buffer_size" / Int32ul,
        "vertex_data_offset" / Int32ul,
        "index_data_offset" / Int32ul,
    )
