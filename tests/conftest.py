"""
Shared fixtures for model definition tests
"""
import pytest

from mdl_parser.parser import MemoryModelFile

from helpers import DefinitionBuilder, MODEL_PATH

@pytest.fixture
def builder():
    """Builder for a well-formed definition with three meshes"""
    return DefinitionBuilder()

@pytest.fixture
def make_file():
    """Wrap definition and format bytes in an in-memory model file"""
    def _make(definition: bytes, formats: bytes = b'', path: str = MODEL_PATH):
        return MemoryModelFile(path, [formats, definition])
    return _make
