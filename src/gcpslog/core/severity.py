"""Translation of built-in record keys and levels to Cloud Logging's schema.

See https://cloud.google.com/logging/docs/structured-logging
"""

from typing import Any

from gcpslog.core.models import Attr, Level

# Built-in keys as the compiler first produces them
TIME_KEY = "time"
LEVEL_KEY = "level"
MESSAGE_KEY = "msg"
SOURCE_KEY = "source"

# Cloud Logging replacements
SEVERITY_KEY = "severity"
CLOUD_MESSAGE_KEY = "message"
SOURCE_LOCATION_KEY = "logging.googleapis.com/sourceLocation"

DEBUG_SEVERITY = "DEBUG"
INFO_SEVERITY = "INFO"
WARNING_SEVERITY = "WARNING"
ERROR_SEVERITY = "ERROR"
DEFAULT_SEVERITY = "DEFAULT"

_SEVERITIES = {
    Level.DEBUG: DEBUG_SEVERITY,
    Level.INFO: INFO_SEVERITY,
    Level.WARN: WARNING_SEVERITY,
    Level.ERROR: ERROR_SEVERITY,
}


def severity_from_level(level: Any) -> str:
    """Map a level to its Cloud Logging severity.

    Custom levels and values that are not levels at all map to DEFAULT.
    """
    # bool is an int subclass but never a level
    if not isinstance(level, int) or isinstance(level, bool):
        return DEFAULT_SEVERITY
    return _SEVERITIES.get(level, DEFAULT_SEVERITY)


def replace_attr(groups: tuple[str, ...], attr: Attr) -> Attr:
    """Replace built-in record attributes with Cloud Logging compatible ones.

    Only top-level attributes are translated; anything inside a group is
    returned unchanged. Can be used on its own as a key-rewrite hook.

    Args:
        groups: Group path of the attribute, empty at the top level.
        attr: The attribute to translate.

    Returns:
        The translated attribute.
    """
    if groups:
        return attr
    if attr.key == LEVEL_KEY:
        return Attr(SEVERITY_KEY, severity_from_level(attr.value))
    if attr.key == SOURCE_KEY:
        return Attr(SOURCE_LOCATION_KEY, attr.value)
    if attr.key == MESSAGE_KEY:
        return Attr(CLOUD_MESSAGE_KEY, attr.value)
    # TIME_KEY needs no replacement
    return attr
