"""
File-backed resource.
"""

from pathlib import Path
from typing import Any

from datareader.batch.readers import FormatReader
from datareader.core.exceptions import ConfigurationError, ResourceError
from datareader.core.transformers import Transformer
from datareader.observability.logger import get_logger

from .base import Resource

logger = get_logger(__name__)


class File(Resource):
    """
    Resource reading a file through a FormatReader.

    The path is only checked when apply() runs; each call opens exactly one
    read-only handle and closes it on every exit path.
    """

    def __init__(self, path: str | Path, format_reader: FormatReader, encoding: str = "utf-8"):
        """
        Args:
            path: File to read
            format_reader: Decoder for the file's format (CSVReader, JSONReader, XMLReader)
            encoding: Text encoding of the file
        """
        super().__init__()
        if format_reader is None:
            raise ConfigurationError("File resource requires a format reader")
        self.path = Path(path)
        self.format_reader = format_reader
        self.encoding = encoding

    @property
    def name(self) -> str:
        return str(self.path)

    def apply(self, transformer: Transformer) -> list[Any]:
        if transformer is None:
            raise ConfigurationError("A transformer is required to apply a resource")

        if not self.path.exists():
            raise ResourceError("File does not exist", source=self.name, reason="not_found")
        if not self.path.is_file():
            raise ResourceError("Path is not a regular file", source=self.name, reason="not_a_file")

        try:
            handle = open(self.path, "r", encoding=self.encoding, newline="")
        except OSError as e:
            raise ResourceError(f"Cannot open file: {e}", source=self.name, reason="open_failed") from e

        logger.debug(f"Opened {self.name}", extra={"format": self.format_reader.format_name})
        with handle:
            items = self.format_reader.read(handle, transformer)

        self.dropped_count = self.format_reader.dropped_count
        self.set_data(items)
        return self.get_data()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={str(self.path)!r}, format={self.format_reader!r})"
