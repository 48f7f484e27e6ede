# mdl_parser/parser/__init__.py
"""Model definition parser module."""
from .definition import ModelDefinition
from .model import Model, Mesh, MeshPart
from .model_file import ModelFile, MemoryModelFile
from .strings import StringsSection, find_strings_section, looks_like_strings, read_strings

__all__ = [
    'ModelDefinition',
    'Model',
    'Mesh',
    'MeshPart',
    'ModelFile',
    'MemoryModelFile',
    'StringsSection',
    'find_strings_section',
    'looks_like_strings',
    'read_strings',
]
