"""Resolution of attribute values into document values."""

from typing import Any

from gcpslog.core.models import GroupValue
from gcpslog.core.ports import LogValuer

# Bound on log_value() chains
MAX_LOG_VALUE_DEPTH = 100


def resolve(value: Any) -> Any:
    """Replace a LogValuer by the value it produces, repeatedly.

    A chain longer than MAX_LOG_VALUE_DEPTH, or a log_value() that raises,
    resolves to a diagnostic string so the record can still be written.
    """
    for _ in range(MAX_LOG_VALUE_DEPTH):
        if not isinstance(value, LogValuer):
            return value
        try:
            value = value.log_value()
        except Exception as exc:
            return f"!!! log_value of {type(value).__qualname__} failed: {exc} !!!"
    if isinstance(value, LogValuer):
        return (
            "!!! log_value called too many times on value of type "
            f"{type(value).__qualname__} !!!"
        )
    return value


def expand(value: Any) -> Any:
    """Resolve a value and turn groups into nested dicts.

    Same-key attributes keep the last value, empty groups are elided and
    empty-key groups are inlined into their parent.
    """
    value = resolve(value)
    if not isinstance(value, GroupValue):
        return value
    out: dict[str, Any] = {}
    _expand_into(value, out)
    return out


def _expand_into(value: GroupValue, out: dict[str, Any]) -> None:
    for attr in value.attrs:
        member = resolve(attr.value)
        if isinstance(member, GroupValue):
            if not attr.key:
                _expand_into(member, out)
                continue
            nested: dict[str, Any] = {}
            _expand_into(member, nested)
            if nested:
                out[attr.key] = nested
        elif attr.key:
            out[attr.key] = member
