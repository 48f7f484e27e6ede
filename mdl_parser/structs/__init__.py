# mdl_parser/structs/__init__.py
"""Record declarations for model definition buffers."""
from .base import FormatError, RangeError, Record, OpaqueRecord, read_structures
from .header import ModelDefinitionHeader, ModelHeader
from .mesh import MeshHeader, MeshPartHeader
from .unknowns import (
    ModelStruct1,
    ModelStruct2,
    ModelStruct3,
    ModelStruct5,
    ModelStruct6,
    ModelStruct7,
    BoneList,
    BoneIndices,
)
from .bounds import BoundingBox, ModelBoundingBoxes
from .vertex_format import VertexFormat, VertexFormatElement, VertexDataType, VertexAttribute
from .bone import Bone
from .named import ModelAttribute, MaterialDefinition

__all__ = [
    'FormatError',
    'RangeError',
    'Record',
    'OpaqueRecord',
    'read_structures',
    'ModelDefinitionHeader',
    'ModelHeader',
    'MeshHeader',
    'MeshPartHeader',
    'ModelStruct1',
    'ModelStruct2',
    'ModelStruct3',
    'ModelStruct5',
    'ModelStruct6',
    'ModelStruct7',
    'BoneList',
    'BoneIndices',
    'BoundingBox',
    'ModelBoundingBoxes',
    'VertexFormat',
    'VertexFormatElement',
    'VertexDataType',
    'VertexAttribute',
    'Bone',
    'ModelAttribute',
    'MaterialDefinition',
]
