"""Bounding volumes."""
from typing import Any, Dict

import numpy as np
from construct import Struct, Float32l

from .base import Record

Vector4 = Float32l[4]

class BoundingBox(Record):
    """Axis aligned box stored as two 4-component vectors."""

    SIZE = 32
    SCHEMA = Struct(
        "min" / Vector4,
        "max" / Vector4,
    )

    def __init__(self, minimum, maximum):
        self.min = np.asarray(minimum, dtype=np.float32)
        self.max = np.asarray(maximum, dtype=np.float32)

    @classmethod
    def from_container(cls, values):
        return cls(minimum=values['min'], maximum=values['max'])

    @property
    def size(self) -> np.ndarray:
        return self.max[:3] - self.min[:3]

    @property
    def center(self) -> np.ndarray:
        return (self.min[:3] + self.max[:3]) / 2

    def __repr__(self):
        return f"BoundingBox(min={self.min.tolist()}, max={self.max.tolist()})"

    def to_dict(self) -> Dict[str, Any]:
        return {'min': self.min.tolist(), 'max': self.max.tolist()}

class ModelBoundingBoxes(Record):
    """The four boxes stored after the bone index block."""

    SIZE = 128
    SCHEMA = Struct(
        "bounding_box" / BoundingBox.SCHEMA,
        "model_bounding_box" / BoundingBox.SCHEMA,
        "water_bounding_box" / BoundingBox.SCHEMA,
        "vertical_fog_bounding_box" / BoundingBox.SCHEMA,
    )
    BOXES = ('bounding_box', 'model_bounding_box', 'water_bounding_box',
             'vertical_fog_bounding_box')

    def __init__(self, bounding_box, model_bounding_box, water_bounding_box,
                 vertical_fog_bounding_box):
        self.bounding_box = bounding_box
        self.model_bounding_box = model_bounding_box
        self.water_bounding_box = water_bounding_box
        self.vertical_fog_bounding_box = vertical_fog_bounding_box

    @classmethod
    def from_container(cls, values):
        return cls(**{name: BoundingBox.from_container(values[name]) for name in cls.BOXES})

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name).to_dict() for name in self.BOXES}
