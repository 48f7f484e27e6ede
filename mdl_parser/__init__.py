# mdl_parser/__init__.py
"""Model definition decoder package."""
from .constants import ModelQuality
from .parser import ModelDefinition, ModelFile, MemoryModelFile
from .structs import FormatError, RangeError

__version__ = '0.1.0'

__all__ = [
    'ModelDefinition',
    'ModelFile',
    'MemoryModelFile',
    'ModelQuality',
    'FormatError',
    'RangeError',
]
