"""Index-addressed objects named through the string table."""
from typing import Any, Dict

class ModelAttribute:
    """Named attribute toggled per mesh part through a bit mask."""

    def __init__(self, definition, index: int):
        self.definition = definition
        self.index = index
        self.name = definition.attribute_names[index]

    @property
    def attribute_mask(self) -> int:
        return 1 << self.index

    def __repr__(self):
        return f"ModelAttribute({self.index}, {self.name!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {'index': self.index, 'name': self.name}

class MaterialDefinition:
    """Material referenced by meshes through their material index.

    Names starting with '/' are relative to the model's own material
    directory; anything else is a full path.
    """

    def __init__(self, definition, index: int):
        self.definition = definition
        self.index = index
        self.name = definition.material_names[index]

    @property
    def is_relative(self) -> bool:
        return self.name.startswith('/')

    def __repr__(self):
        return f"MaterialDefinition({self.index}, {self.name!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {'index': self.index, 'name': self.name, 'is_relative': self.is_relative}
