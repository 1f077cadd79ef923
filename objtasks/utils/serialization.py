"""JSON serialization helpers."""

import json
import logging
from typing import Any, Optional

from pydantic import BaseModel

from ..core.config import SerializationConfig

logger = logging.getLogger(__name__)


class SerializationError(ValueError):
    """Raised when a value cannot be converted to or from JSON."""
    pass


def _to_jsonable(obj: Any) -> Any:
    """Fallback encoder for values the json module does not know."""
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, config: Optional[SerializationConfig] = None) -> str:
    """Return the JSON representation of an object.

    Output is compact by default: ``[1,2,3]``, ``{"width":10,"height":20}``.

    Args:
        obj: Value to serialize. pydantic models and plain objects are
            serialized by their fields.
        config: Formatting options.

    Returns:
        JSON text.

    Raises:
        SerializationError: If the value is not JSON serializable or is a
            non-finite float.
    """
    config = config or SerializationConfig()
    separators = (",", ": ") if config.indent is not None else (",", ":")

    try:
        return json.dumps(
            obj,
            default=_to_jsonable,
            indent=config.indent,
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
            separators=separators,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def from_json(proto: type, json_text: str) -> Any:
    """Return an object of the given type built from JSON text.

    The instance is created without calling its constructor and every parsed
    field is copied onto it, so it exposes the methods of ``proto``.

    Args:
        proto: Class whose behaviour the result should have.
        json_text: JSON text of an object.

    Returns:
        Instance of ``proto`` carrying the parsed fields.

    Raises:
        SerializationError: If the text is not valid JSON or not an object,
            or carries keys a pydantic model without extra="allow" cannot hold.

    Example:
        >>> r = from_json(Rectangle, '{"width":10,"height":20}')
        >>> r.get_area()
        200
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.debug(f"Failed to decode JSON for {proto.__name__}: {e}")
        raise SerializationError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    if isinstance(proto, type) and issubclass(proto, BaseModel):
        unknown = [key for key in data if key not in proto.model_fields]
        if unknown and proto.model_config.get("extra") != "allow":
            raise SerializationError(
                f"{proto.__name__} does not accept extra fields: {', '.join(unknown)}"
            )
        return proto.model_construct(**data)

    result = proto.__new__(proto)
    for key, value in data.items():
        setattr(result, key, value)
    return result
