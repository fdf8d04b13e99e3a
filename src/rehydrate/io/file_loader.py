"""Concrete Loader that supports local YAML / JSON fixture files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..exceptions import FixtureLoadError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class FileLoader:
    """Read a fixture file from disk and return the decoded record(s)."""

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    @staticmethod
    def load(path: str | Path) -> dict[str, Any] | list[Any]:
        file_path = Path(path)

        # validation
        if not file_path.exists():
            logger.error("File not found: %s", file_path)
            raise FixtureLoadError(f"File not found: {file_path}")

        if file_path.suffix.lower() not in FileLoader.supported_exts:
            raise FixtureLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(FileLoader.supported_exts))}"
            )

        raw_text = file_path.read_text(encoding="utf-8")

        data = _decode(file_path, raw_text)

        if not isinstance(data, (dict, list)):
            raise FixtureLoadError("Top-level value must be a mapping or a list")

        logger.debug(
            "Fixture loaded from %s (%s, %d item(s))",
            file_path.name,
            type(data).__name__,
            len(data),
        )
        return data


def _decode(file_path: Path, raw_text: str) -> Any:
    """Decode fixture text, pointing at the offending line on failure."""
    if file_path.suffix.lower() not in _YAML_EXTS:
        try:
            return json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise FixtureLoadError(
                f"Invalid JSON fixture {file_path.name} "
                f"(line {exc.lineno}, column {exc.colno}): {exc.msg}"
            ) from exc

    try:
        return _yaml_parser.load(raw_text)
    except YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        where = ""
        if mark is not None:
            where = f" (line {mark.line + 1}, column {mark.column + 1})"
        raise FixtureLoadError(
            f"Invalid YAML fixture {file_path.name}{where}: {exc}"
        ) from exc
