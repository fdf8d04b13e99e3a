"""
FixturePipeline – high-level orchestration from fixture to model instances.

Responsibilities
----------------
1.   Accept either a filesystem path (str/Path) or pre-decoded data.
2.   Invoke the I/O layer to obtain the decoded record(s).
3.   Invoke the engine to build the model instance(s).
4.   Surface all domain-specific exceptions unchanged so that callers
     can handle them in a single try/except.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .conversion.engine import Deserializer
from .exceptions import FixtureLoadError
from .io.loader_factory import LoaderFactory

logger = logging.getLogger(__name__)


class FixturePipeline:
    """End-to-end converter fixture → model instance(s)."""

    def __init__(
        self,
        source: str | Path | dict[str, Any] | list[Any],
        model_type: type,
        is_array: bool = False,
        deserializer: Deserializer | None = None,
    ) -> None:
        """
        Parameters
        ----------
        source
            Path/str to .yaml, .yml, .json or already-decoded data.
        model_type
            Model class to build.
        is_array
            Whether the fixture holds a list of records.
        deserializer
            Engine to use; defaults to one over the shared registry.
        """
        if isinstance(source, (str, Path)):
            logger.debug("Loading fixture file: %s", source)
            loader_cls = LoaderFactory.resolve(source)
            self._raw = loader_cls.load(source)
        elif isinstance(source, (dict, list)):
            logger.debug("Using in-memory fixture data")
            self._raw = source
        else:
            raise FixtureLoadError(
                "FixturePipeline: source must be Path | str | dict | list"
            )

        self._model_type = model_type
        self._is_array = is_array
        self._deserializer = deserializer or Deserializer()

    @property
    def raw(self) -> dict[str, Any] | list[Any]:
        return self._raw

    def run(self) -> Any:
        """Return the built instance(s) (raises on any mismatch)."""
        logger.debug("Deserializing fixture as %s", self._model_type.__qualname__)
        result = self._deserializer.deserialize(
            self._model_type, self._raw, self._is_array
        )

        logger.info(
            "Deserialization succeeded – %d %s instance(s)",
            len(result) if self._is_array else 1,
            self._model_type.__qualname__,
        )
        return result
