"""
Record normalizer.

Turns bin values into display text and editor JSON, and turns form input
back into bins ready to write.
"""
import json
from typing import Any, Optional, Union

from .errors import ValidationError

# A bin value as it travels between the API and the UI
BinValue = Union[str, int, float, bool, None, list["BinValue"], dict[str, "BinValue"]]

BIN_TYPES = ("string", "number", "boolean", "json")


class _Omit:
    """Marker for a form field that should not be written."""

    def __repr__(self) -> str:
        return "OMIT"


OMIT = _Omit()


# ==================== Display ====================


def format_value(value: Any) -> str:
    """Format a bin value for a table cell."""
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


# ==================== Editor ====================


def parse_nested(value: BinValue) -> BinValue:
    """
    Expand JSON stored as strings, at any depth.

    A string is replaced only when it holds a JSON object or array;
    other strings (including ones like "42" or "true") are kept as-is.
    """
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            return value
        if isinstance(parsed, (dict, list)):
            return parse_nested(parsed)
        return value
    if isinstance(value, dict):
        return {name: parse_nested(item) for name, item in value.items()}
    if isinstance(value, list):
        return [parse_nested(item) for item in value]
    return value


def bins_to_editor_text(bins: dict[str, BinValue]) -> str:
    """Pretty JSON for the edit panel."""
    return json.dumps(parse_nested(bins or {}), indent=2, ensure_ascii=False)


def editor_text_to_bins(text: str) -> dict[str, BinValue]:
    """
    Parse the edit panel text back into bins.

    Raises:
        ValidationError: text is not a JSON object with at least one bin
    """
    try:
        bins = json.loads(text)
    except ValueError as e:
        raise ValidationError(f"Invalid JSON format for bins: {e}", field="bins") from e
    if not isinstance(bins, dict):
        raise ValidationError("Bins must be a JSON object", field="bins")
    if not bins:
        raise ValidationError("At least one bin is required", field="bins")
    return bins


def parse_ttl(text: Optional[str]) -> Optional[int]:
    """TTL field text to seconds; blank means the store default (None)."""
    if text is None or not str(text).strip():
        return None
    try:
        return int(str(text).strip())
    except ValueError as e:
        raise ValidationError(f"TTL must be a whole number of seconds: {text}", field="ttl") from e


# ==================== New record form ====================


def coerce_bin_value(raw: Any, declared_type: str) -> Any:
    """
    Convert raw form input to the declared bin type.

    Empty input means "leave the bin out" and returns ``OMIT``, except for
    booleans where an unset field is an explicit ``False``. ``"0"`` and
    ``"false"`` are values, not empty input.
    """
    if declared_type not in BIN_TYPES:
        raise ValidationError(f"Unknown bin type: {declared_type}", field="type")

    if declared_type == "boolean":
        if isinstance(raw, bool):
            return raw
        return str(raw).strip().lower() == "true" if raw is not None else False

    if raw is None or (isinstance(raw, str) and raw == ""):
        return OMIT

    if declared_type == "number":
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return raw
        text = str(raw).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError as e:
            raise ValidationError(f"Not a number: {raw}", field="value") from e

    if declared_type == "json":
        try:
            return json.loads(raw)
        except ValueError as e:
            raise ValidationError(f"Invalid JSON value: {e}", field="value") from e

    return raw


def build_record(
    namespace: str,
    set_name: str,
    key: str,
    bins: list[dict[str, Any]],
    ttl: Optional[str] = None,
    key_type: str = "string",
) -> dict[str, Any]:
    """
    Assemble a write request from the new-record form.

    Args:
        namespace: Target namespace
        set_name: Target set
        key: Primary key text
        bins: Form rows of ``{"name", "value", "type"}``
        ttl: TTL text, blank for the store default
        key_type: Native key type

    Returns:
        Body for ``POST /api/records``

    Raises:
        ValidationError: missing fields, duplicate bin names or bad values
    """
    if not (namespace or "").strip() or not (set_name or "").strip() or not (key or "").strip():
        raise ValidationError("Namespace, Set Name, and Key are required")

    rows = [row for row in bins if (row.get("name") or "").strip()]
    written: dict[str, Any] = {}
    for row in rows:
        name = row["name"].strip()
        if name in written:
            raise ValidationError(f'Duplicate bin name: "{name}"', field="bins")
        # omitted bins still claim their name
        written[name] = coerce_bin_value(row.get("value"), row.get("type") or "string")

    written = {name: value for name, value in written.items() if value is not OMIT}
    if not written:
        raise ValidationError("At least one bin with a name and value is required", field="bins")

    return {
        "namespace": namespace.strip(),
        "set_name": set_name.strip(),
        "key": key.strip(),
        "key_type": key_type,
        "bins": written,
        "ttl": parse_ttl(ttl),
    }
