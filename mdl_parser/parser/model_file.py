"""Container interface supplying the raw parts of a model file."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence, Union
import logging

from ..structs.base import FormatError

logger = logging.getLogger(__name__)

class ModelFile(ABC):
    """Source of the byte sections a model definition is decoded from.

    Part 0 holds the vertex declarations, part 1 the definition itself.
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """Identifying path of the source file"""
        pass

    @abstractmethod
    def get_part(self, index: int) -> bytes:
        """Return the raw bytes of part `index`"""
        pass

class MemoryModelFile(ModelFile):
    """Model file whose parts are already in memory."""

    def __init__(self, path: str, parts: Sequence[bytes]):
        self._path = path
        self._parts = [bytes(part) for part in parts]

    @property
    def path(self) -> str:
        return self._path

    def get_part(self, index: int) -> bytes:
        if index < 0 or index >= len(self._parts):
            raise FormatError(f"{self._path} has no part {index}", path=self._path)
        return self._parts[index]

    @classmethod
    def from_part_files(cls, path: str,
                        part_paths: Sequence[Union[str, Path]]) -> 'MemoryModelFile':
        """Load parts previously extracted to separate files.

        Raises:
            FileNotFoundError: If a part file does not exist
        """
        parts = []
        for part_path in part_paths:
            part_path = Path(part_path)
            if not part_path.is_file():
                raise FileNotFoundError(f"Part file not found: {part_path}")
            parts.append(part_path.read_bytes())
            logger.debug(f"Loaded part {len(parts) - 1} from {part_path} ({len(parts[-1])} bytes)")
        return cls(path, parts)

    def __repr__(self):
        return f"MemoryModelFile({self._path!r}, {len(self._parts)} parts)"
