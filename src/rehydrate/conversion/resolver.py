"""Resolve a raw field value through a converter table or the date rule."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping, Optional

from dateutil import parser as date_parser

from ..config import DEFAULT_CONFIG, DeserializerConfig
from ..exceptions import InvalidDateCastError, MissingRequiredConverterError
from ..metadata.models import TargetKind, target_kind_of
from ..metadata.runtime_types import RuntimeType, runtime_type_of

logger = logging.getLogger(__name__)

# Fills date parts missing from a lenient string, e.g. "10:00"
_PARSE_DEFAULT = datetime(1970, 1, 1)


class ConverterResolver:
    """
    Turn one raw value into the value assigned to a field.

    A converter table, when present, must cover the runtime type of every
    value it receives. Without a table, date targets accept strings and
    epoch numbers; anything else is returned unchanged.
    """

    def __init__(self, config: DeserializerConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._logger = logger.getChild(self.__class__.__name__)

    def resolve(
        self,
        target_type: Optional[type],
        converters: Optional[Mapping[RuntimeType, Callable[[Any], Any]]],
        raw_value: Any,
        *,
        model_type: type | None = None,
        field_name: str | None = None,
    ) -> Any:
        """
        Convert raw_value for a field declared with target_type/converters.

        Args:
            target_type: Declared target type, possibly None
            converters: Converter table keyed by runtime type, possibly None
            raw_value: Value taken from the raw record
            model_type: Owning model type, only used in error messages
            field_name: Owning field, only used in error messages

        Returns:
            The converted value; None is returned unchanged

        Raises:
            MissingRequiredConverterError: If converters does not cover the
                runtime type of raw_value
            InvalidDateCastError: If a date target receives a value that
                cannot become a date
        """
        if raw_value is None:
            return raw_value

        runtime_type = runtime_type_of(raw_value)

        if converters is not None:
            converter = converters.get(runtime_type)
            if converter is None:
                raise MissingRequiredConverterError(
                    target_type,
                    runtime_type.value,
                    model_type=model_type,
                    field_name=field_name,
                )
            self._logger.debug(
                "Applying '%s' converter to field %s", runtime_type.value, field_name
            )
            return converter(raw_value)

        if target_kind_of(target_type) is TargetKind.DATE:
            return self._to_date(
                target_type,
                raw_value,
                runtime_type,
                model_type=model_type,
                field_name=field_name,
            )

        return raw_value

    # ------------------------------------------------------------------ #
    # Built-in date rule
    # ------------------------------------------------------------------ #

    def _to_date(
        self,
        target_type: type,
        raw_value: Any,
        runtime_type: RuntimeType,
        **context: Any,
    ) -> date:
        if runtime_type is RuntimeType.STRING:
            parsed = self._parse_date_string(raw_value, **context)
        elif runtime_type is RuntimeType.NUMBER:
            parsed = self._from_timestamp(raw_value, **context)
        else:
            raise InvalidDateCastError(runtime_type.value, **context)

        if target_type is date:
            return parsed.date()
        return parsed

    def _parse_date_string(self, raw_value: str, **context: Any) -> datetime:
        try:
            if self.config.strict_iso_dates:
                parsed = date_parser.isoparse(raw_value)
            else:
                parsed = date_parser.parse(raw_value, default=_PARSE_DEFAULT)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateCastError(
                RuntimeType.STRING.value, f"cannot parse {raw_value!r}", **context
            ) from exc

        # Strings without an offset are UTC, like epoch numbers
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    def _from_timestamp(self, raw_value: float, **context: Any) -> datetime:
        seconds = raw_value / self.config.epoch_unit.per_second
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (ValueError, OverflowError, OSError) as exc:
            raise InvalidDateCastError(
                RuntimeType.NUMBER.value,
                f"timestamp {raw_value!r} is out of range",
                **context,
            ) from exc
