"""Base classes for the frontend mirrors of backend payload shapes.

A mirror accepts either an already-structured mapping or JSON text and
builds a frozen instance from it. Request shapes validate strictly;
result shapes are total: a missing key becomes None rather than an error.
"""

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings
from shared.exceptions import ValidationError
from shared.infrastructure.json_codec import to_mapping
from shared.logging import get_logger

logger = get_logger(__name__)


def _field_errors(exc: PydanticValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "__root__",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


class MirrorModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    namespace: ClassVar[str] = ""

    @classmethod
    def qualified_name(cls) -> str:
        return f"{cls.namespace}.{cls.__name__}" if cls.namespace else cls.__name__

    @classmethod
    def decode(cls, source: Any = None, *, strict: bool | None = None) -> Self:
        """Build an instance from a mapping or a JSON document.

        ``strict`` only affects result shapes; request shapes always
        validate strictly.

        Raises:
            ParseError: if textual source is not a JSON object.
            ValidationError: if the payload does not fit the shape.
        """
        return cls._from_mapping(to_mapping(source), strict)

    @classmethod
    def create_from(cls, source: Any = None, *, strict: bool | None = None) -> Self:
        return cls.decode(source, strict=strict)

    @classmethod
    def _from_mapping(cls, payload: dict[str, Any], strict: bool | None) -> Self:
        try:
            return cls.model_validate(payload, strict=True)
        except PydanticValidationError as exc:
            raise ValidationError(
                f"Invalid {cls.__name__} payload", _field_errors(exc)
            ) from exc

    def encode(self) -> dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()


class ResultModel(MirrorModel):
    """Mirror of a backend result.

    Every field is an optional string read by its exact key. A key whose
    value is neither a string nor null is a type mismatch: strict decoding
    raises, lenient decoding treats the field as absent.
    """

    @classmethod
    def _from_mapping(cls, payload: dict[str, Any], strict: bool | None) -> Self:
        if strict is None:
            strict = get_settings().STRICT_DECODE

        try:
            return cls.model_validate(payload, strict=True)
        except PydanticValidationError as exc:
            errors = _field_errors(exc)
            if strict:
                raise ValidationError(
                    f"Invalid {cls.__name__} payload", errors
                ) from exc

        dropped = {error["field"] for error in errors}
        logger.warning(
            "Treating mistyped %s fields as absent: %s",
            cls.__name__,
            ", ".join(sorted(dropped)),
        )
        kept = {key: value for key, value in payload.items() if key not in dropped}
        return cls.model_validate(kept, strict=True)
