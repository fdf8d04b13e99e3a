"""Single-argument deserializers for use as mapping callbacks."""

from __future__ import annotations

from typing import Any, Callable

from .engine import Deserializer


def make_deserializer(
    model_type: type,
    is_array: bool = False,
    *,
    deserializer: Deserializer | None = None,
) -> Callable[[Any], Any]:
    """
    Return ``raw -> instance`` bound to model_type.

    Meant to be handed to a response-mapping step, e.g.
    ``map(make_deserializer(Order), payloads)``.
    """
    engine = deserializer or Deserializer()

    def _deserialize(raw: Any) -> Any:
        return engine.deserialize(model_type, raw, is_array)

    return _deserialize
