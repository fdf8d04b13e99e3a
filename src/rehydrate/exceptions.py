"""
exceptions.py

Custom, typed exception hierarchy used across the raw record → model pipeline
"""

from __future__ import annotations

from typing import Any

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


def _type_name(model_type: Any) -> str:
    return getattr(model_type, "__qualname__", None) or repr(model_type)


class RehydrateError(Exception):
    """
    Root of all errors raised by this project.
    """


class DeclarationError(RehydrateError):
    """
    Raised while field metadata is being declared on a model type.

    These are always programmer errors: fix the model declaration.
    """


class DeserializationError(RehydrateError):
    """
    Raised by the engine when a raw record does not match the metadata
    declared for its model type.

    ``model_type`` and ``field_name`` identify where the mismatch was found;
    either may be ``None`` for top-level failures.
    """

    def __init__(
        self,
        message: str,
        *,
        model_type: type | None = None,
        field_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.model_type = model_type
        self.field_name = field_name


class FixtureLoadError(RehydrateError):
    """
    Raised by the I/O layer when a fixture document cannot be read or parsed.

    Examples
    --------
    * File does not exist / bad extension
    * YAML or JSON syntax error
    * Top-level value is neither a mapping nor a list
    """


# --------------------------------------------------------------------------- #
#                          Declaration-time errors                            #
# --------------------------------------------------------------------------- #


class SkipConverterConflictError(DeclarationError):
    """A field declares both ``skip`` and a converter table."""

    def __init__(self, model_type: type, field_name: str) -> None:
        super().__init__(
            f"{_type_name(model_type)}.{field_name}: "
            "skip and converters cannot be declared on the same field"
        )
        self.model_type = model_type
        self.field_name = field_name


# --------------------------------------------------------------------------- #
#                          Deserialization errors                             #
# --------------------------------------------------------------------------- #


class MissingDataTypeAnnotationError(DeserializationError):
    """A structured raw value reached a field with no registered metadata."""

    def __init__(self, model_type: type, field_name: str) -> None:
        super().__init__(
            f"Missing data type annotation for {_type_name(model_type)}.{field_name}: "
            "cannot rebuild a structured value without a declared target type",
            model_type=model_type,
            field_name=field_name,
        )


class ExpectedArrayError(DeserializationError):
    """An array was declared but the raw value is not a sequence."""

    def __init__(
        self, model_type: type | None = None, field_name: str | None = None
    ) -> None:
        if field_name is None:
            message = "Object must be array"
        else:
            message = (
                f"{_type_name(model_type)}.{field_name} is declared as an array "
                "but the raw value is not one"
            )
        super().__init__(message, model_type=model_type, field_name=field_name)


class ArrayNotExpectedError(DeserializationError):
    """A sequence arrived for a field that is not declared as an array."""

    def __init__(self, model_type: type, field_name: str) -> None:
        super().__init__(
            f"{_type_name(model_type)}.{field_name} received an array "
            "but is not declared with is_array=True",
            model_type=model_type,
            field_name=field_name,
        )


class ExpectedObjectError(DeserializationError):
    """A model instance was requested from a raw value that is not a mapping."""

    def __init__(
        self,
        target_type: type,
        runtime_type: str,
        *,
        model_type: type | None = None,
        field_name: str | None = None,
    ) -> None:
        message = (
            f"Cannot build {_type_name(target_type)} "
            f"from a raw value of type '{runtime_type}'"
        )
        if field_name is not None:
            message = f"{message} (field {_type_name(model_type)}.{field_name})"
        super().__init__(message, model_type=model_type, field_name=field_name)
        self.target_type = target_type
        self.runtime_type = runtime_type


class InvalidDateCastError(DeserializationError):
    """A date field received a value that cannot become a date."""

    def __init__(
        self,
        runtime_type: str,
        detail: str | None = None,
        *,
        model_type: type | None = None,
        field_name: str | None = None,
    ) -> None:
        message = f"Invalid date cast from type '{runtime_type}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, model_type=model_type, field_name=field_name)
        self.runtime_type = runtime_type


class MissingRequiredConverterError(DeserializationError):
    """A converter table does not cover the runtime type of the raw value."""

    def __init__(
        self,
        target_type: Any,
        runtime_type: str,
        *,
        model_type: type | None = None,
        field_name: str | None = None,
    ) -> None:
        target = "untyped field" if target_type is None else _type_name(target_type)
        super().__init__(
            f"Missing required converter for '{runtime_type}' "
            f"(declared target type: {target})",
            model_type=model_type,
            field_name=field_name,
        )
        self.target_type = target_type
        self.runtime_type = runtime_type


class InvalidFieldKeyError(DeserializationError):
    """A raw record key cannot name an attribute of the model instance."""

    def __init__(self, model_type: type, key: Any) -> None:
        super().__init__(
            f"{_type_name(model_type)}: record key {key!r} is not a string "
            "and cannot name a field",
            model_type=model_type,
        )
        self.key = key
