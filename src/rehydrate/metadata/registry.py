"""Registry of field metadata keyed by (model type, field name)."""

import logging
from typing import Any, Iterator

from ..exceptions import SkipConverterConflictError
from .models import FieldMetadata

logger = logging.getLogger(__name__)


class MetadataRegistry:
    """
    Registry mapping (model type, field name) pairs to field metadata.

    Entries are written while model types are declared and only read
    afterwards; all writes must happen before the first deserialization
    call, so no locking is done. Redeclaring a field replaces its entry.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._fields: dict[type, dict[str, FieldMetadata]] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    def register(
        self, model_type: type, field_name: str, metadata: FieldMetadata
    ) -> None:
        """
        Store metadata for one field of a model type.

        Args:
            model_type: The model class owning the field
            field_name: Key of the field in raw records
            metadata: Reconstruction rule for the field

        Raises:
            ValueError: If model_type is not a class or field_name is empty
            SkipConverterConflictError: If metadata declares both skip
                and converters
        """
        if not isinstance(model_type, type):
            raise ValueError(f"Model type must be a class, got {model_type!r}")

        if not field_name:
            raise ValueError("Field name cannot be empty")

        if metadata.skip and metadata.has_converters:
            raise SkipConverterConflictError(model_type, field_name)

        declared = self._fields.setdefault(model_type, {})
        if field_name in declared:
            self._logger.warning(
                "Overwriting metadata for %s.%s", model_type.__qualname__, field_name
            )

        declared[field_name] = metadata
        self._logger.debug(
            "Registered %s.%s -> %s",
            model_type.__qualname__,
            field_name,
            metadata.target_kind.value,
        )

    def update(self, model_type: type, field_name: str, **changes: Any) -> FieldMetadata:
        """
        Merge changes into the metadata declared directly on model_type.

        Starts from an empty entry if the field was not declared on this
        exact class yet; inherited entries are not copied.

        Returns:
            The merged metadata that was registered
        """
        current = self._fields.get(model_type, {}).get(field_name)
        base = (
            {name: getattr(current, name) for name in FieldMetadata.model_fields}
            if current is not None
            else {}
        )
        merged = FieldMetadata(**{**base, **changes})
        self.register(model_type, field_name, merged)
        return merged

    def lookup(self, model_type: type, field_name: str) -> FieldMetadata | None:
        """
        Return the metadata for a field, or None if it was never declared.

        The class MRO is searched so subclasses inherit the field metadata
        of their bases.
        """
        for klass in getattr(model_type, "__mro__", (model_type,)):
            declared = self._fields.get(klass)
            if declared is not None and field_name in declared:
                return declared[field_name]
        return None

    def fields_of(self, model_type: type) -> dict[str, FieldMetadata]:
        """
        Get the effective field metadata of a model type, inherited included.
        """
        effective: dict[str, FieldMetadata] = {}
        for klass in reversed(model_type.__mro__):
            effective.update(self._fields.get(klass, {}))
        return effective

    def model_types(self) -> list[type]:
        """Get every model type with at least one declared field."""
        return list(self._fields)

    def clear(self) -> None:
        """Clear all registered metadata."""
        self._fields.clear()
        self._logger.debug("Cleared all field metadata")

    def __len__(self) -> int:
        """Return the number of declared (model type, field) pairs."""
        return sum(len(declared) for declared in self._fields.values())

    def __contains__(self, key: tuple[type, str]) -> bool:
        """Check if a (model type, field name) pair resolves to metadata."""
        model_type, field_name = key
        return self.lookup(model_type, field_name) is not None

    def __iter__(self) -> Iterator[tuple[type, str, FieldMetadata]]:
        for model_type, declared in self._fields.items():
            for field_name, metadata in declared.items():
                yield model_type, field_name, metadata


# Default registry instance shared by the declaration API
_default_registry = MetadataRegistry()


def get_default_registry() -> MetadataRegistry:
    """Get the default metadata registry instance."""
    return _default_registry
