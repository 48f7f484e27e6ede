"""Skeleton bones."""
from typing import Any, Dict, Optional, Tuple

from .bounds import BoundingBox

class Bone:
    """A bone name paired with its bounding box."""

    def __init__(self, index: int, name: str, bounding_box: BoundingBox):
        self.index = index
        self.name = name
        self.bounding_box = bounding_box

    @classmethod
    def read(cls, definition, index: int, data: bytes,
             offset: int) -> Tuple[Optional['Bone'], int]:
        """Decode bone `index` at offset.

        A record cut short by the end of the buffer is not decoded; None is
        returned with the offset unchanged.
        """
        if offset + BoundingBox.SIZE > len(data):
            return None, offset
        names = definition.bone_names
        name = names[index] if index < len(names) else ''
        bounding_box, offset = BoundingBox.read(data, offset)
        return cls(index, name, bounding_box), offset

    def __repr__(self):
        return f"Bone({self.index}, {self.name!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'name': self.name,
            'bounding_box': self.bounding_box.to_dict(),
        }
