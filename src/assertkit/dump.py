"""Deterministic structural rendering of Python values.

The dump is the input to the diff engine: two values are rendered line by
line and the lines are compared. Nested containers put one child per line
with a trailing comma on every child except the last, e.g.::

    TestStruct(
      inner_value: TestStruct.InnerStruct(
        int_value: 5,
        float_value: 4.0
      ),
      outer_value: 4
    )
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping, Set
from typing import Any

from pydantic import BaseModel

from assertkit.config import Settings, get_settings

ELLIPSIS = "…"


def dump(value: Any, settings: Settings | None = None) -> str:
    """Render ``value`` as multi-line text."""
    settings = settings or get_settings()
    return "\n".join(_Dumper(settings).lines(value))


def _type_name(value: Any) -> str:
    return type(value).__qualname__


def _scalar(value: Any) -> str | None:
    if value is None:
        return "None"
    if isinstance(value, enum.Enum):
        return f"{type(value).__qualname__}.{value.name}"
    if isinstance(value, (bool, int, float, complex, str, bytes)):
        return repr(value)
    return None


class _Dumper:
    def __init__(self, settings: Settings) -> None:
        self.pad = " " * settings.indent
        self.max_depth = settings.max_depth
        self._active: set[int] = set()

    def lines(self, value: Any, depth: int = 0) -> list[str]:
        scalar = _scalar(value)
        if scalar is not None:
            return [scalar]

        if id(value) in self._active:
            return [f"{_type_name(value)}(<cycle>)"]
        if depth >= self.max_depth:
            return [f"{_type_name(value)}({ELLIPSIS})"]

        self._active.add(id(value))
        try:
            return self._composite(value, depth)
        finally:
            self._active.discard(id(value))

    def _composite(self, value: Any, depth: int) -> list[str]:
        if isinstance(value, BaseModel):
            fields = [(name, getattr(value, name)) for name in type(value).model_fields]
            return self._block(f"{_type_name(value)}(", ")", fields, depth)

        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            fields = [
                (field.name, getattr(value, field.name))
                for field in dataclasses.fields(value)
                if field.repr
            ]
            return self._block(f"{_type_name(value)}(", ")", fields, depth)

        if isinstance(value, BaseException):
            items = [(None, arg) for arg in value.args]
            return self._block(f"{_type_name(value)}(", ")", items, depth)

        if isinstance(value, Mapping):
            items = [(self._key(key), item) for key, item in value.items()]
            if not items:
                return ["{}" if type(value) is dict else f"{_type_name(value)}({{}})"]
            return self._block(self._open(value, "{"), self._close(value, "}"), items, depth)

        if isinstance(value, tuple) and hasattr(value, "_fields"):
            fields = [(name, getattr(value, name)) for name in value._fields]
            return self._block(f"{_type_name(value)}(", ")", fields, depth)

        if isinstance(value, (list, tuple)):
            opener, closer = ("[", "]") if isinstance(value, list) else ("(", ")")
            if not value:
                return [self._open(value, opener) + self._close(value, closer)]
            items = [(f"[{index}]", item) for index, item in enumerate(value)]
            return self._block(self._open(value, opener), self._close(value, closer), items, depth)

        if isinstance(value, Set):
            if not value:
                return [f"{_type_name(value)}()"]
            items = sorted(((None, item) for item in value), key=lambda pair: self._sort_key(pair[1]))
            return self._block(f"{_type_name(value)}({{", "})", items, depth)

        # Plain objects without a custom repr are dumped through their attributes.
        if type(value).__repr__ is object.__repr__ and hasattr(value, "__dict__"):
            fields = list(vars(value).items())
            return self._block(f"{_type_name(value)}(", ")", fields, depth)

        return [repr(value)]

    def _block(
        self,
        opener: str,
        closer: str,
        items: list[tuple[str | None, Any]],
        depth: int,
    ) -> list[str]:
        if not items:
            return [opener + closer]

        lines = [opener]
        for position, (label, item) in enumerate(items):
            child = self.lines(item, depth + 1)
            if label is not None:
                child[0] = f"{label}: {child[0]}"
            if position < len(items) - 1:
                child[-1] += ","
            lines.extend(self.pad + line for line in child)
        lines.append(closer)
        return lines

    def _key(self, key: Any) -> str:
        return _scalar(key) or repr(key)

    def _sort_key(self, item: Any) -> str:
        return "\n".join(self.lines(item, self.max_depth - 1))

    @staticmethod
    def _open(value: Any, bracket: str) -> str:
        if type(value) in (dict, list, tuple):
            return bracket
        return f"{_type_name(value)}({bracket}"

    @staticmethod
    def _close(value: Any, bracket: str) -> str:
        if type(value) in (dict, list, tuple):
            return bracket
        return f"{bracket})"
