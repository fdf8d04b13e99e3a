"""Fixture I/O: read decoded records from local files."""

from .file_loader import FileLoader
from .loader_factory import LoaderFactory, LoaderProtocol

__all__ = ["FileLoader", "LoaderFactory", "LoaderProtocol"]
