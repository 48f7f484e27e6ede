"""Per-quality views over a decoded model definition."""
from typing import Any, Dict, Optional, Tuple

from ..constants import ModelQuality
from ..structs import (
    BoneList,
    MaterialDefinition,
    MeshHeader,
    MeshPartHeader,
    ModelAttribute,
    ModelHeader,
    VertexFormat,
)

class MeshPart:
    """Subdivision of a mesh with the attributes it enables."""

    def __init__(self, definition, index: int):
        self.index = index
        self.header: MeshPartHeader = definition.mesh_part_headers[index]
        self.attributes: Tuple[ModelAttribute, ...] = tuple(
            attribute for attribute in definition.attributes
            if self.header.attribute_mask & attribute.attribute_mask
        )

    def __repr__(self):
        return f"MeshPart({self.index})"

class Mesh:
    """One mesh of a model with its resolved references.

    References whose index falls outside the decoded tables resolve to
    None.
    """

    def __init__(self, model: 'Model', index: int):
        definition = model.definition
        self.model = model
        self.index = index
        self.header: MeshHeader = definition.mesh_headers[index]

        self.vertex_format: Optional[VertexFormat] = None
        if index < len(definition.vertex_formats):
            self.vertex_format = definition.vertex_formats[index]

        self.material: Optional[MaterialDefinition] = None
        if self.header.material_index < len(definition.materials):
            self.material = definition.materials[self.header.material_index]

        self.bone_list: Optional[BoneList] = None
        if self.header.bone_list_index < len(definition.bone_lists):
            self.bone_list = definition.bone_lists[self.header.bone_list_index]

        part_end = min(self.header.part_index + self.header.part_count,
                       len(definition.mesh_part_headers))
        self.parts: Tuple[MeshPart, ...] = tuple(
            MeshPart(definition, i) for i in range(self.header.part_index, part_end)
        )

    def __repr__(self):
        return f"Mesh({self.index}, {self.header.vertex_count} vertices)"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'vertex_count': self.header.vertex_count,
            'index_count': self.header.index_count,
            'material': self.material.name if self.material else None,
            'parts': [
                {
                    'index': part.index,
                    'index_count': part.header.index_count,
                    'attributes': [a.name for a in part.attributes],
                }
                for part in self.parts
            ],
            'vertex_format': self.vertex_format.to_dict() if self.vertex_format else None,
        }

class Model:
    """Meshes of a single quality level."""

    def __init__(self, definition, quality: ModelQuality):
        self.definition = definition
        self.quality = quality
        self.header: ModelHeader = definition.model_headers[quality]

        mesh_end = min(self.header.mesh_index + self.header.mesh_count,
                       len(definition.mesh_headers))
        self.meshes: Tuple[Mesh, ...] = tuple(
            Mesh(self, i) for i in range(self.header.mesh_index, mesh_end)
        )

    def __repr__(self):
        return f"Model({self.definition.path!r}, {self.quality.name})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'quality': self.quality.name,
            'mesh_index': self.header.mesh_index,
            'mesh_count': self.header.mesh_count,
            'header': self.header.to_dict(),
            'meshes': [mesh.to_dict() for mesh in self.meshes],
        }
