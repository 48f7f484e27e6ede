"""
Buffer builders for model definition tests
"""
import struct
from typing import Dict, List, Optional, Sequence, Tuple

from mdl_parser.structs import (
    BoneList,
    BoundingBox,
    MeshHeader,
    MeshPartHeader,
    ModelDefinitionHeader,
    ModelHeader,
    VertexAttribute,
    VertexDataType,
    VertexFormat,
    VertexFormatElement,
)

# Leading bytes that must not be mistaken for the strings section:
# count 5 with size 0, then count 0
PREFIX = struct.pack('<ii', 5, 0)

MODEL_PATH = 'chara/monster/m0001/obj/body/b0001/model/m0001b0001.mdl'

def build_header(**values) -> bytes:
    """Build a ModelDefinitionHeader, every field defaulting to zero"""
    fields = {
        'radius': 1.5,
        'mesh_count': 0,
        'attribute_count': 0,
        'part_count': 0,
        'material_count': 0,
        'bone_count': 0,
        'bone_list_count': 0,
        'unknown_struct5_count': 0,
        'unknown_struct6_count': 0,
        'unknown_struct7_count': 0,
        'unknown2': 0,
        'unknown_struct1_count': 0,
        'unknown_struct2_count': 0,
        'unknown3': 0,
        'unknown4': [0] * 5,
        'unknown_struct3_count': 0,
        'unknown5': [0] * 8,
    }
    fields.update(values)
    return ModelDefinitionHeader.SCHEMA.build(fields)

def build_model_header(mesh_index: int = 0, mesh_count: int = 0) -> bytes:
    fields = {sc.name: 0 for sc in ModelHeader.SCHEMA.subcons if sc.name}
    fields.update(mesh_index=mesh_index, mesh_count=mesh_count,
                  model_lod_range=0.0, texture_lod_range=0.0)
    return ModelHeader.SCHEMA.build(fields)

def build_mesh_header(vertex_count: int = 4, index_count: int = 6,
                      material_index: int = 0, part_index: int = 0,
                      part_count: int = 0, bone_list_index: int = 0) -> bytes:
    return MeshHeader.SCHEMA.build({
        'vertex_count': vertex_count,
        'index_count': index_count,
        'material_index': material_index,
        'part_index': part_index,
        'part_count': part_count,
        'bone_list_index': bone_list_index,
        'start_index': 0,
        'vertex_buffer_offsets': [0, 0, 0],
        'vertex_buffer_strides': [12, 8, 0],
        'vertex_stream_count': 2,
    })

def build_part(attribute_mask: int = 0, index_offset: int = 0,
               index_count: int = 3) -> bytes:
    return MeshPartHeader.SCHEMA.build({
        'index_offset': index_offset,
        'index_count': index_count,
        'attribute_mask': attribute_mask,
        'bone_start_index': 0,
        'bone_count': 0,
    })

def build_bone_list(bones: Sequence[int]) -> bytes:
    padded = list(bones) + [0] * (64 - len(bones))
    return BoneList.SCHEMA.build({'bones': padded, 'bone_count': len(bones)})

def build_box(low: float = -1.0, high: float = 1.0) -> bytes:
    return BoundingBox.SCHEMA.build({
        'min': [low, low, low, 1.0],
        'max': [high, high, high, 1.0],
    })

def build_vertex_format(elements: Sequence[Tuple[int, int, int, int]]) -> bytes:
    """Build one declaration padded to the fixed stride"""
    data = b''.join(
        VertexFormatElement.SCHEMA.build({
            'source_part': part, 'offset': offset,
            'data_type': data_type, 'attribute': attribute,
        })
        for part, offset, data_type, attribute in elements
    )
    data += bytes([VertexFormat.END_MARKER]) + b'\0' * (VertexFormatElement.SIZE - 1)
    return data.ljust(VertexFormat.STRIDE, b'\0')

DEFAULT_ELEMENTS = [
    (0, 0, VertexDataType.SINGLE3, VertexAttribute.POSITION),
    (1, 0, VertexDataType.HALF2, VertexAttribute.UV),
]

def build_strings(names: Sequence[str]) -> Tuple[bytes, Dict[str, int]]:
    """Pack names into a string block and return their relative offsets"""
    data = b''
    offsets = {}
    for name in names:
        if name not in offsets:
            offsets[name] = len(data)
            data += name.encode('utf-8') + b'\0'
    return data, offsets

class DefinitionBuilder:
    """Assembles a definition part section by section"""

    def __init__(self):
        self.quality_mesh_counts = (2, 1, 0)
        self.attributes = ['atr_a', 'atr_b']
        self.materials = ['/mt_c0101_a.mtrl', 'chara/common/mt_shared.mtrl']
        self.bones = ['n_root', 'j_kosi', 'j_sebo_a']
        self.part_masks = [0b01, 0b10, 0b11]
        self.bone_lists = [[0, 1], [1, 2]]
        self.unknown_counts = {1: 1, 2: 1, 3: 2, 5: 1, 6: 1, 7: 2}
        self.bone_indices: Optional[List[int]] = [0, 1, 2]
        self.padding: Optional[int] = 1
        self.bounding_boxes = True
        self.bone_records: Optional[int] = None  # defaults to len(self.bones)
        self.osg_padding = False
        self.header_overrides: Dict[str, int] = {}
        self.name_overrides: Dict[str, List[int]] = {}

    @property
    def mesh_count(self) -> int:
        return sum(self.quality_mesh_counts)

    def _name_table(self, key: str, names: Sequence[str], offsets: Dict[str, int]) -> bytes:
        values = self.name_overrides.get(key, [offsets[n] for n in names])
        return struct.pack(f'<{len(values)}i', *values)

    def sections(self) -> List[Tuple[str, bytes]]:
        names = self.attributes + self.materials + self.bones
        string_data, offsets = build_strings(names)
        counts = self.unknown_counts

        header = build_header(**{
            'mesh_count': self.mesh_count,
            'attribute_count': len(self.attributes),
            'part_count': len(self.part_masks),
            'material_count': len(self.materials),
            'bone_count': len(self.bones),
            'bone_list_count': len(self.bone_lists),
            'unknown_struct1_count': counts[1],
            'unknown_struct2_count': counts[2],
            'unknown_struct3_count': counts[3],
            'unknown_struct5_count': counts[5],
            'unknown_struct6_count': counts[6],
            'unknown_struct7_count': counts[7],
            **self.header_overrides,
        })

        model_headers = b''
        mesh_index = 0
        for count in self.quality_mesh_counts:
            model_headers += build_model_header(mesh_index, count)
            mesh_index += count

        meshes = b''
        for i in range(self.mesh_count):
            meshes += build_mesh_header(
                material_index=i % len(self.materials) if self.materials else 0,
                part_index=min(i, len(self.part_masks)),
                part_count=1 if i < len(self.part_masks) else 0,
                bone_list_index=i % len(self.bone_lists) if self.bone_lists else 0,
            )

        bone_indices = b''
        if self.bone_indices is not None:
            bone_indices = struct.pack('<I', 2 * len(self.bone_indices))
            bone_indices += struct.pack(f'<{len(self.bone_indices)}H', *self.bone_indices)

        padding = b''
        if self.padding is not None:
            padding = bytes([self.padding]) + b'\0' * self.padding

        boxes = b''
        if self.bounding_boxes:
            boxes = b''.join(build_box(-i - 1.0, i + 1.0) for i in range(4))

        bone_records = len(self.bones) if self.bone_records is None else self.bone_records

        return [
            ('prefix', PREFIX),
            ('strings', struct.pack('<ii', len(names), len(string_data)) + string_data),
            ('header', header),
            ('unknown_structs1', b'\x11' * 32 * counts[1]),
            ('model_headers', model_headers),
            ('osg', b'\xee' * 120 if self.osg_padding else b''),
            ('mesh_headers', meshes),
            ('attribute_names', self._name_table('attributes', self.attributes, offsets)),
            ('unknown_structs2', b'\x22' * 20 * counts[2]),
            ('mesh_part_headers', b''.join(build_part(m) for m in self.part_masks)),
            ('unknown_structs3', b'\x33' * 10 * counts[3]),
            ('material_names', self._name_table('materials', self.materials, offsets)),
            ('bone_names', self._name_table('bones', self.bones, offsets)),
            ('bone_lists', b''.join(build_bone_list(b) for b in self.bone_lists)),
            ('unknown_structs5', b'\x55' * 16 * counts[5]),
            ('unknown_structs6', b'\x66' * 12 * counts[6]),
            ('unknown_structs7', b'\x77' * 4 * counts[7]),
            ('bone_indices', bone_indices),
            ('padding', padding),
            ('bounding_boxes', boxes),
            ('bones', b''.join(build_box(-0.5, 0.5 + i) for i in range(bone_records))),
        ]

    def build(self, stop_after: Optional[str] = None) -> bytes:
        """Concatenate sections, optionally ending after the named one"""
        data = b''
        for name, section in self.sections():
            data += section
            if name == stop_after:
                break
        return data

    def offset_of(self, section: str) -> int:
        """Absolute offset at which a section starts"""
        offset = 0
        for name, data in self.sections():
            if name == section:
                return offset
            offset += len(data)
        raise KeyError(section)

    def build_formats(self, count: Optional[int] = None) -> bytes:
        count = self.mesh_count if count is None else count
        return build_vertex_format(DEFAULT_ELEMENTS) * count
