"""Record compiler: scope chain + record -> Cloud Logging document."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from gcpslog.core import errors
from gcpslog.core.models import Attr, GroupValue, Level, Record
from gcpslog.core.scope import ScopeNode
from gcpslog.core.severity import (
    CLOUD_MESSAGE_KEY,
    LEVEL_KEY,
    MESSAGE_KEY,
    SOURCE_KEY,
    TIME_KEY,
    replace_attr,
)
from gcpslog.core.values import resolve

# Key-rewrite hook: (group path, attr) -> attr, or None to drop the attr
ReplaceAttr = Callable[[tuple[str, ...], Attr], Attr | None]


@dataclass(frozen=True)
class HandlerOptions:
    """Handler configuration.

    Attributes:
        level: Minimum level of records that are written. Defaults to INFO.
        add_source: Add the call site under
            ``logging.googleapis.com/sourceLocation``.
        replace_attr: Optional hook applied to every attribute, built-in
            ones included, before the Cloud Logging translation and before
            error extraction. The translation covers every top-level
            attribute, so a caller's own ``msg``, ``level`` or ``source``
            attribute is renamed like the built-in one.
    """

    level: int = Level.INFO
    add_source: bool = False
    replace_attr: ReplaceAttr | None = None


def compile_record(
    chain: ScopeNode,
    record: Record,
    options: HandlerOptions | None = None,
) -> dict[str, Any] | None:
    """Compile a record and the attributes bound on its chain into a document.

    Args:
        chain: Scope chain of the logger the record was emitted through.
        record: The logging call.
        options: Handler options, defaults if None.

    Returns:
        The document, or None if the record's level is below the threshold.
    """
    options = options or HandlerOptions()
    if record.level < options.level:
        return None

    root: dict[str, Any] = {}
    compiler = _Compiler(options.replace_attr)

    builtins = []
    if record.time is not None:
        builtins.append(Attr(TIME_KEY, record.time))
    builtins.append(Attr(LEVEL_KEY, record.level))
    if options.add_source and record.source is not None:
        builtins.append(Attr(SOURCE_KEY, record.source))
    builtins.append(Attr(MESSAGE_KEY, record.message))
    for attr in builtins:
        compiler.add(root, (), attr)

    levels = chain.levels()
    levels[-1][1].extend(record.attrs)

    # Innermost level first so a group only lands in its parent if non-empty
    child: dict[str, Any] = {}
    for depth in range(len(levels) - 1, -1, -1):
        path, attrs = levels[depth]
        target = root if depth == 0 else {}
        for attr in attrs:
            compiler.add(target, path, attr)
        if child:
            target[levels[depth + 1][0][-1]] = child
        child = target

    if errors.ERROR_KEY in root:
        _set_error_report(root)
    return root


def _set_error_report(root: dict[str, Any]) -> None:
    value = root[errors.ERROR_KEY]
    message, location = errors.extract(value)
    root[errors.ERROR_REPORT_TYPE_KEY] = errors.ERROR_REPORT_TYPE_VALUE
    root[CLOUD_MESSAGE_KEY] = message
    if location is not None:
        root[errors.REPORT_LOCATION_KEY] = location
    root[errors.ERROR_KEY] = errors.stored_value(value)


class _Compiler:
    """Inserts attributes into a level's mapping, applying the hooks."""

    def __init__(self, hook: ReplaceAttr | None) -> None:
        self._hook = hook

    def add(
        self,
        target: dict[str, Any],
        groups: tuple[str, ...],
        attr: Attr,
    ) -> None:
        # The root error value goes to the extractor unresolved
        if not groups and attr.key == errors.ERROR_KEY:
            value = attr.value
        else:
            value = resolve(attr.value)
        if isinstance(value, GroupValue):
            self._add_group(target, groups, attr.key, value)
            return

        replaced = self._replace(groups, Attr(attr.key, value))
        if replaced is None:
            return
        replaced = replace_attr(groups, replaced)
        if replaced.key:
            target[replaced.key] = replaced.value

    def _add_group(
        self,
        target: dict[str, Any],
        groups: tuple[str, ...],
        key: str,
        value: GroupValue,
    ) -> None:
        if not key:
            for member in value.attrs:
                self.add(target, groups, member)
            return
        nested: dict[str, Any] = {}
        path = (*groups, key)
        for member in value.attrs:
            self.add(nested, path, member)
        if nested:
            target[key] = nested

    def _replace(self, groups: tuple[str, ...], attr: Attr) -> Attr | None:
        if self._hook is None:
            return attr
        return self._hook(groups, attr)
