"""Model definition decoder.

Drives the fixed section order of the definition part:

    strings | header | struct1[] | model headers x3 | (osg padding)
    | mesh headers | attribute names | struct2[] | mesh parts | struct3[]
    | material names | bone names | bone lists | struct5/6/7[]
    | bone indices? | padding? | bounding boxes? | bones

and reads the vertex declarations from the separate format part.
"""
from typing import Any, Dict, List, Optional, Tuple
import logging
import threading

from ..constants import (
    MODEL_COUNT,
    FORMAT_PART,
    DEFINITION_PART,
    OSG_PATH_MARKER,
    OSG_SKIP_SIZE,
    MAX_PADDING,
    ModelQuality,
)
from ..structs import (
    FormatError,
    RangeError,
    read_structures,
    ModelDefinitionHeader,
    ModelHeader,
    MeshHeader,
    MeshPartHeader,
    ModelStruct1,
    ModelStruct2,
    ModelStruct3,
    ModelStruct5,
    ModelStruct6,
    ModelStruct7,
    BoneList,
    BoneIndices,
    ModelBoundingBoxes,
    VertexFormat,
    Bone,
    ModelAttribute,
    MaterialDefinition,
)
from .model import Model
from .model_file import ModelFile
from .strings import StringsSection, find_strings_section, read_strings

logger = logging.getLogger(__name__)

class ModelDefinition:
    """Decoded model definition.

    Everything is decoded in the constructor; a failure anywhere raises a
    single FormatError naming the source file. Model views are built on
    first request and cached per quality.
    """

    def __init__(self, file: ModelFile):
        self.file = file

        self.strings: Optional[StringsSection] = None
        self.header: Optional[ModelDefinitionHeader] = None
        self.unknown_structs1: Tuple[ModelStruct1, ...] = ()
        self.model_headers: Tuple[ModelHeader, ...] = ()
        self.available_qualities: Tuple[ModelQuality, ...] = ()
        self.mesh_headers: Tuple[MeshHeader, ...] = ()
        self.attribute_names: Tuple[str, ...] = ()
        self.attributes: Tuple[ModelAttribute, ...] = ()
        self.unknown_structs2: Tuple[ModelStruct2, ...] = ()
        self.mesh_part_headers: Tuple[MeshPartHeader, ...] = ()
        self.unknown_structs3: Tuple[ModelStruct3, ...] = ()
        self.material_names: Tuple[str, ...] = ()
        self.materials: Tuple[MaterialDefinition, ...] = ()
        self.bone_names: Tuple[str, ...] = ()
        self.bone_lists: Tuple[BoneList, ...] = ()
        self.unknown_structs5: Tuple[ModelStruct5, ...] = ()
        self.unknown_structs6: Tuple[ModelStruct6, ...] = ()
        self.unknown_structs7: Tuple[ModelStruct7, ...] = ()
        self.bone_indices: Optional[BoneIndices] = None
        self.bounding_boxes: Optional[ModelBoundingBoxes] = None
        self.bones: Tuple[Bone, ...] = ()
        self.vertex_formats: Tuple[VertexFormat, ...] = ()

        # Cursor position at the start of each section
        self.section_offsets: Dict[str, int] = {}
        self.end_offset = 0

        self._models: Dict[int, Model] = {}
        self._models_lock = threading.Lock()

        self._build()

    @property
    def path(self) -> str:
        return self.file.path

    @property
    def is_osg(self) -> bool:
        return OSG_PATH_MARKER in self.file.path

    def get_model(self, quality) -> Model:
        """Return the cached model view for a quality level.

        Args:
            quality: ModelQuality or its integer value

        Raises:
            RangeError: If quality is outside 0..2
        """
        value = int(quality)
        if value < 0 or value >= MODEL_COUNT:
            raise RangeError(f"Quality {quality} is out of range")

        model = self._models.get(value)
        if model is None:
            with self._models_lock:
                model = self._models.get(value)
                if model is None:
                    model = Model(self, ModelQuality(value))
                    self._models[value] = model
        return model

    def get_models(self) -> List[Model]:
        """Return model views for every available quality."""
        return [self.get_model(quality) for quality in self.available_qualities]

    def _build(self) -> None:
        try:
            buffer = bytes(self.file.get_part(DEFINITION_PART))
            self._build_definition(buffer)
            self._build_vertex_formats()
        except Exception as e:
            raise FormatError(
                f"Failed to parse model definition for {self.file.path}: {e}",
                path=self.file.path
            ) from e

    def _mark(self, name: str, offset: int) -> None:
        self.section_offsets[name] = offset

    def _build_definition(self, buffer: bytes) -> None:
        self.strings = find_strings_section(buffer)
        strings_offset = self.strings.offset

        offset = self.strings.end
        self._mark('header', offset)
        self.header, offset = ModelDefinitionHeader.read(buffer, offset)
        header = self.header

        logger.debug(f"Header read from offset {self.section_offsets['header']:#x}:")
        logger.debug(f"  MeshCount: {header.mesh_count}")
        logger.debug(f"  AttributeCount: {header.attribute_count}")
        logger.debug(f"  PartCount: {header.part_count}")
        logger.debug(f"  MaterialCount: {header.material_count}")
        logger.debug(f"  BoneCount: {header.bone_count}")

        header.validate()

        self._mark('unknown_structs1', offset)
        structs1, offset = read_structures(buffer, ModelStruct1, header.unknown_struct1_count, offset)
        self.unknown_structs1 = tuple(structs1)

        self._mark('model_headers', offset)
        model_headers, offset = read_structures(buffer, ModelHeader, MODEL_COUNT, offset)
        self.model_headers = tuple(model_headers)

        if self.is_osg and offset + OSG_SKIP_SIZE <= len(buffer):
            logger.debug(f"Skipping {OSG_SKIP_SIZE} bytes of osg padding at {offset:#x}")
            offset += OSG_SKIP_SIZE

        self.available_qualities = tuple(
            ModelQuality(i) for i, model_header in enumerate(self.model_headers[:MODEL_COUNT])
            if model_header.mesh_count > 0
        )

        self._mark('mesh_headers', offset)
        mesh_headers, offset = read_structures(buffer, MeshHeader, header.mesh_count, offset)
        self.mesh_headers = tuple(mesh_headers)

        self._mark('attribute_names', offset)
        attribute_names, offset = read_strings(buffer, header.attribute_count, offset, strings_offset)
        self.attribute_names = tuple(attribute_names)
        self.attributes = tuple(ModelAttribute(self, i) for i in range(len(self.attribute_names)))

        self._mark('unknown_structs2', offset)
        structs2, offset = read_structures(buffer, ModelStruct2, header.unknown_struct2_count, offset)
        self.unknown_structs2 = tuple(structs2)

        self._mark('mesh_part_headers', offset)
        parts, offset = read_structures(buffer, MeshPartHeader, header.part_count, offset)
        self.mesh_part_headers = tuple(parts)

        self._mark('unknown_structs3', offset)
        structs3, offset = read_structures(buffer, ModelStruct3, header.unknown_struct3_count, offset)
        self.unknown_structs3 = tuple(structs3)

        self._mark('material_names', offset)
        material_names, offset = read_strings(buffer, header.material_count, offset, strings_offset)
        self.material_names = tuple(material_names)
        self.materials = tuple(MaterialDefinition(self, i) for i in range(len(self.material_names)))

        self._mark('bone_names', offset)
        bone_names, offset = read_strings(buffer, header.bone_count, offset, strings_offset)
        self.bone_names = tuple(bone_names)

        self._mark('bone_lists', offset)
        bone_lists, offset = read_structures(buffer, BoneList, header.bone_list_count, offset)
        self.bone_lists = tuple(bone_lists)

        self._mark('unknown_structs5', offset)
        structs5, offset = read_structures(buffer, ModelStruct5, header.unknown_struct5_count, offset)
        self.unknown_structs5 = tuple(structs5)

        self._mark('unknown_structs6', offset)
        structs6, offset = read_structures(buffer, ModelStruct6, header.unknown_struct6_count, offset)
        self.unknown_structs6 = tuple(structs6)

        self._mark('unknown_structs7', offset)
        structs7, offset = read_structures(buffer, ModelStruct7, header.unknown_struct7_count, offset)
        self.unknown_structs7 = tuple(structs7)

        # Optional trailing blocks
        if offset < len(buffer):
            bone_indices_offset = offset
            self.bone_indices, offset = BoneIndices.read(buffer, offset)
            if self.bone_indices is not None:
                self._mark('bone_indices', bone_indices_offset)

        if offset < len(buffer) and buffer[offset] <= MAX_PADDING:
            padding = buffer[offset]
            if offset + padding + 1 <= len(buffer):
                offset += padding + 1

        if offset + ModelBoundingBoxes.SIZE <= len(buffer):
            self._mark('bounding_boxes', offset)
            self.bounding_boxes, offset = ModelBoundingBoxes.read(buffer, offset)

        self._mark('bones', offset)
        bones = []
        for i in range(header.bone_count):
            if offset >= len(buffer):
                break
            bone, offset = Bone.read(self, i, buffer, offset)
            if bone is None:
                break
            bones.append(bone)
        self.bones = tuple(bones)

        if len(self.bones) < header.bone_count:
            logger.debug(f"Buffer exhausted after {len(self.bones)} of {header.bone_count} bones")

        self.end_offset = offset

    def _build_vertex_formats(self) -> None:
        try:
            buffer = bytes(self.file.get_part(FORMAT_PART))

            formats = []
            offset = 0
            for _ in range(self.header.mesh_count):
                if offset >= len(buffer):
                    break
                vertex_format, offset = VertexFormat.read(buffer, offset)
                formats.append(vertex_format)
            self.vertex_formats = tuple(formats)

            if len(formats) < self.header.mesh_count:
                logger.debug(f"Format part holds {len(formats)} of {self.header.mesh_count} vertex formats")
        except FormatError as e:
            raise FormatError(f"Failed to build vertex formats: {e}") from e

    def __repr__(self):
        return f"ModelDefinition({self.file.path!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Summarize the decoded definition."""
        return {
            'path': self.file.path,
            'strings': {
                'offset': self.strings.offset,
                'size': self.strings.size,
                'count': self.strings.count,
            },
            'header': self.header.to_dict(),
            'available_qualities': [q.name for q in self.available_qualities],
            'attributes': list(self.attribute_names),
            'materials': list(self.material_names),
            'bones': list(self.bone_names),
            'decoded_bones': len(self.bones),
            'vertex_formats': [f.to_dict() for f in self.vertex_formats],
            'bounding_boxes': self.bounding_boxes.to_dict() if self.bounding_boxes else None,
            'section_offsets': dict(self.section_offsets),
            'end_offset': self.end_offset,
        }
