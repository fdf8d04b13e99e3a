"""
Command-line interface for checking fixtures against declared model types.

Usage:
    python -m rehydrate myapp.models:Order fixtures/order.json
    python -m rehydrate myapp.models:Order fixtures/orders.yaml --array
"""

import argparse
import importlib
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from .exceptions import DeclarationError, DeserializationError, FixtureLoadError
from .pipeline import FixturePipeline

logger = logging.getLogger(__name__)

_DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_BRIEF_FORMAT = "rehydrate: %(levelname)s: %(message)s"


@dataclass
class ModelSpec:
    """Import location of a model class."""

    module: str
    class_name: str


def parse_model_argument(model_arg: str) -> ModelSpec:
    """
    Parse a model argument in MODULE:CLASS format.

    Args:
        model_arg: Model argument string (e.g., 'myapp.models:Order')

    Returns:
        ModelSpec with the parsed module path and class name

    Raises:
        ValueError: If the argument format is invalid
    """
    if ":" not in model_arg:
        raise ValueError(
            f"Invalid model format: '{model_arg}'. "
            "Expected format: MODULE:CLASS (e.g., 'myapp.models:Order')"
        )

    module, class_name = (part.strip() for part in model_arg.split(":", 1))

    if not module or not class_name:
        raise ValueError(
            f"Empty module or class in model: '{model_arg}'. "
            "Expected format: MODULE:CLASS (e.g., 'myapp.models:Order')"
        )

    return ModelSpec(module=module, class_name=class_name)


def load_model_type(spec: ModelSpec) -> type:
    """Import the module (running its declarations) and return the class."""
    module = importlib.import_module(spec.module)
    model_type = getattr(module, spec.class_name, None)
    if not isinstance(model_type, type):
        raise ValueError(f"'{spec.class_name}' is not a class in module {spec.module}")
    return model_type


def summarize(instance: Any) -> str:
    """One-line description of a built instance and its field types."""
    if instance is None:
        return "None"

    parts = []
    for name, value in vars(instance).items():
        if isinstance(value, list):
            kinds = sorted({type(item).__name__ for item in value})
            parts.append(f"{name}=list[{len(value)}: {', '.join(kinds) or '-'}]")
        else:
            parts.append(f"{name}={type(value).__name__}")
    return f"{type(instance).__name__}({', '.join(parts)})"


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure logging for a CLI run.

    Printed summaries go to stdout; log records go to stderr so both can
    be redirected separately. Per-instance engine traces only show with
    --debug; --verbose adds the pipeline summary.

    Args:
        debug: Log every built instance and applied converter.
        verbose: Log loading and pipeline progress with timestamps.
    """
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    format_str = _DETAILED_FORMAT if debug or verbose else _BRIEF_FORMAT

    logging.basicConfig(level=level, format=format_str, stream=sys.stderr, force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rehydrate",
        description="Deserialize a JSON/YAML fixture into a declared model type.",
    )
    parser.add_argument("model", help="Model class in MODULE:CLASS format")
    parser.add_argument("fixture", type=Path, help="Fixture file (.json, .yaml, .yml)")
    parser.add_argument(
        "--array", action="store_true", help="The fixture holds a list of records"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(debug=args.debug, verbose=args.verbose)

    try:
        model_type = load_model_type(parse_model_argument(args.model))
    except (ValueError, ImportError) as e:
        logger.error("%s", e)
        return 2
    except DeclarationError as e:
        logger.error("Invalid model declaration: %s: %s", type(e).__name__, e)
        return 2

    try:
        result = FixturePipeline(args.fixture, model_type, is_array=args.array).run()
    except (FixtureLoadError, DeserializationError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    for instance in result if args.array else [result]:
        print(summarize(instance))
    return 0
