"""Components: the types that providers produce and consume."""

from __future__ import annotations

import re
from dataclasses import dataclass

from dein.gotype import GoType, Kind
from dein.utils import uniq

_MAP_PATTERN = re.compile(r"[\]*,]*map\[")


class ComponentError(ValueError):
    """Raised when a type cannot be used as a component."""


def _path_base(path: str) -> str:
    if not path:
        return "."
    path = path.rstrip("/")
    if not path:
        return "/"
    return path.rsplit("/", 1)[-1]


def _strip_params(type_name: str) -> str:
    return type_name.split("[", 1)[0]


def _split_params(type_name: str) -> list[TypeParam]:
    i = type_name.find("[")
    if i < 0:
        return []
    return [parse_type_param(p) for p in type_name[i + 1 : -1].split(",")]


@dataclass(frozen=True)
class Component:
    """A named type together with its pointer and slice prefix."""

    type_name: str
    pkg_path: str
    prefix: str = ""

    @property
    def name(self) -> str:
        return _strip_params(self.type_name)

    def _key(self) -> tuple[str, str, str]:
        return (self.pkg_path, self.type_name, self.prefix)

    def less(self, other: Component) -> bool:
        """Order by package, name and prefix; equal components compare as less."""
        if self == other:
            return True
        return self._key() < other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self._key() < other._key()

    def type_params(self) -> list[TypeParam]:
        return _split_params(self.type_name)

    def pkg_paths(self) -> list[str]:
        paths = [p for tp in self.type_params() for p in tp.pkg_paths()]
        return uniq([*paths, self.pkg_path])


@dataclass(frozen=True)
class TypeParam:
    """A type argument of a generic component."""

    type_name: str
    pkg_path: str = ""
    prefix: str = ""

    @property
    def name(self) -> str:
        return _strip_params(self.type_name)

    def type_params(self) -> list[TypeParam]:
        return _split_params(self.type_name)

    def pkg_paths(self) -> list[str]:
        own = [self.pkg_path] if self.pkg_path else []
        return uniq([*own, *(p for tp in self.type_params() for p in tp.pkg_paths())])


def parse_type_param(raw: str) -> TypeParam:
    """Parse one type argument as reflection prints it, e.g. ``*pkg/path.Name``."""
    type_str = raw.lstrip("[]*")
    prefix = raw[: len(raw) - len(type_str)]
    if not type_str:
        raise ComponentError(f"invalid type parameter {raw!r}")

    if "." not in _path_base(type_str):
        return TypeParam(type_str, "", prefix)

    bracket = type_str.find("[")
    head = type_str[:bracket] if bracket >= 0 else type_str
    dot = head.rfind(".")
    if dot < 0:
        return TypeParam(type_str, "", prefix)

    return TypeParam(type_str[dot + 1 :], type_str[:dot], prefix)


def new_component(go_type: GoType) -> Component:
    """Build a component from a Go type, rejecting unsupported shapes."""
    prefix = ""
    t = go_type
    while t.kind in (Kind.SLICE, Kind.ARRAY, Kind.POINTER):
        prefix += "*" if t.kind is Kind.POINTER else "[]"
        assert t.elem is not None
        t = t.elem

    if t.kind is Kind.MAP:
        raise ComponentError("map type is not supported")

    if not t.pkg_path:
        if not t.type_name:
            raise ComponentError("anonymous struct is not supported")
        raise ComponentError("builtin type is not supported")

    type_name = t.type_name
    if not type_name:
        raise ComponentError("unnamed type is not supported")

    i = type_name.find("[")
    if i >= 0:
        params = type_name[i + 1 : -1]
        if " " in params:
            raise ComponentError("anonymous struct for type param is not supported")
        if _MAP_PATTERN.search(params):
            raise ComponentError("map type is not supported in type param")

    return Component(type_name, t.pkg_path, prefix)