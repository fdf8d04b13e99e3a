"""Choose the appropriate concrete fixture loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Protocol, cast, runtime_checkable

from ..exceptions import FixtureLoadError
from .file_loader import FileLoader


@runtime_checkable
class LoaderProtocol(Protocol):
    """Required signature for every concrete loader."""

    supported_exts: ClassVar[set[str]]

    @staticmethod
    def load(path: str | Path) -> dict[str, Any] | list[Any]: ...


class LoaderFactory:
    """Resolve a loader by file extension (first match wins)."""

    _LOADERS: tuple[type, ...] = (FileLoader,)

    @classmethod
    def resolve(cls, path: str | Path) -> type[LoaderProtocol]:
        """Return the first loader that supports the given path."""
        suffix = Path(path).suffix.lower()
        for loader in cls._LOADERS:
            if suffix in loader.supported_exts:
                return cast(type[LoaderProtocol], loader)

        raise FixtureLoadError(f"No loader found for: {path}")
