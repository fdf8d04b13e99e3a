"""Type-directed engine turning raw records into model instances."""

from __future__ import annotations

import logging
from typing import Any

from ..config import DEFAULT_CONFIG, DeserializerConfig
from ..exceptions import (
    ArrayNotExpectedError,
    ExpectedArrayError,
    ExpectedObjectError,
    InvalidFieldKeyError,
    MissingDataTypeAnnotationError,
)
from ..metadata.models import FieldMetadata, TargetKind
from ..metadata.registry import MetadataRegistry, get_default_registry
from ..metadata.runtime_types import (
    is_primitive,
    is_record,
    is_sequence,
    runtime_type_of,
)
from .resolver import ConverterResolver

logger = logging.getLogger(__name__)


class Deserializer:
    """
    Rebuild model instances from decoded records.

    Each instance is created through the no-argument constructor of its
    model type, then every key of the raw record is assigned according to
    the field metadata found in the registry. Nested model fields get
    freshly built instances of their own.

    Any mismatch between a record and the declared metadata aborts the
    whole call; no partially built object is ever returned.
    """

    def __init__(
        self,
        registry: MetadataRegistry | None = None,
        resolver: ConverterResolver | None = None,
        config: DeserializerConfig | None = None,
    ) -> None:
        """
        Args:
            registry: Field metadata to consult (default: shared registry)
            resolver: Converter resolver (default: built from config)
            config: Engine settings, forwarded to the default resolver
        """
        self.registry = registry if registry is not None else get_default_registry()
        self.config = config or DEFAULT_CONFIG
        self.resolver = resolver or ConverterResolver(self.config)
        self._logger = logger.getChild(self.__class__.__name__)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def deserialize(self, model_type: type, raw: Any, is_array: bool = False) -> Any:
        """
        Build an instance (or a list of instances) of model_type from raw.

        Args:
            model_type: Model class to build
            raw: Decoded record, or sequence of records when is_array
            is_array: Whether raw is a sequence of records

        Returns:
            A model_type instance, a list of them, or None when raw is None

        Raises:
            DeserializationError: If raw does not match the declared metadata
        """
        if is_array:
            if not is_sequence(raw):
                raise ExpectedArrayError()
            return [self._build(model_type, item) for item in raw]

        return self._build(model_type, raw)

    # ------------------------------------------------------------------ #
    # Instance construction
    # ------------------------------------------------------------------ #

    def _build(
        self,
        model_type: type,
        raw: Any,
        owner: type | None = None,
        field_name: str | None = None,
    ) -> Any:
        if raw is None:
            return None

        if not is_record(raw):
            raise ExpectedObjectError(
                model_type,
                runtime_type_of(raw).value,
                model_type=owner,
                field_name=field_name,
            )

        instance = model_type()
        for key, value in raw.items():
            if not isinstance(key, str):
                raise InvalidFieldKeyError(model_type, key)
            setattr(instance, key, self._field_value(model_type, key, value))

        self._logger.debug("Built %s (%d field(s))", model_type.__qualname__, len(raw))
        return instance

    def _field_value(self, model_type: type, key: str, value: Any) -> Any:
        metadata = self.registry.lookup(model_type, key)

        if metadata is None:
            if is_primitive(value):
                return value
            raise MissingDataTypeAnnotationError(model_type, key)

        if metadata.skip:
            return value

        if metadata.is_array:
            if not is_sequence(value):
                raise ExpectedArrayError(model_type, key)
            return [self._single_value(model_type, key, metadata, item) for item in value]

        return self._single_value(model_type, key, metadata, value)

    def _single_value(
        self, model_type: type, key: str, metadata: FieldMetadata, value: Any
    ) -> Any:
        if is_sequence(value):
            raise ArrayNotExpectedError(model_type, key)

        kind = metadata.target_kind

        if metadata.has_converters or kind is TargetKind.DATE:
            return self.resolver.resolve(
                metadata.target_type,
                metadata.converters,
                value,
                model_type=model_type,
                field_name=key,
            )

        if kind is TargetKind.MODEL:
            return self._build(metadata.target_type, value, model_type, key)

        # TargetKind.ABSENT: only primitives can pass through untouched
        if not is_primitive(value):
            raise MissingDataTypeAnnotationError(model_type, key)
        return value
