"""A description of Go types and functions, as seen by the code generator."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass


class Kind(enum.Enum):
    """The kind of a Go type."""

    BASIC = "basic"
    STRUCT = "struct"
    INTERFACE = "interface"
    FUNC = "func"
    POINTER = "ptr"
    SLICE = "slice"
    ARRAY = "array"
    MAP = "map"


_COMPOSITE_KINDS = frozenset({Kind.POINTER, Kind.SLICE, Kind.ARRAY, Kind.MAP})


@dataclass(frozen=True)
class GoType:
    """A Go type: a named type, a builtin, or a composite built from others.

    ``name`` is the bare type name; ``type_name`` adds instantiated type
    arguments the way Go's reflection reports them.
    """

    kind: Kind
    name: str = ""
    pkg_path: str = ""
    type_args: tuple[GoType, ...] = ()
    methods: frozenset[str] = frozenset()
    elem: GoType | None = None
    key: GoType | None = None
    length: int = 0
    fields: tuple[tuple[str, GoType], ...] = ()

    @property
    def type_name(self) -> str:
        if not self.name:
            return ""
        if not self.type_args:
            return self.name
        return f"{self.name}[{','.join(_path_string(a) for a in self.type_args)}]"

    def _method_set(self) -> frozenset[str]:
        if self.kind is Kind.POINTER:
            assert self.elem is not None
            if self.elem.kind is Kind.INTERFACE:
                return frozenset()
            return self.elem.methods
        return self.methods

    def implements(self, iface: GoType) -> bool:
        """Report whether this type's method set satisfies ``iface``."""
        if iface.kind is not Kind.INTERFACE:
            raise TypeError(f"{iface} is not an interface type")
        return iface.methods <= self._method_set()

    def __str__(self) -> str:
        return _render(self, qualified=False)


def _pkg_base(pkg_path: str) -> str:
    return pkg_path.rstrip("/").rsplit("/", 1)[-1]


def _render(t: GoType, *, qualified: bool) -> str:
    def sub(x: GoType | None) -> str:
        assert x is not None
        return _render(x, qualified=qualified)

    if t.kind is Kind.POINTER:
        return "*" + sub(t.elem)
    if t.kind is Kind.SLICE:
        return "[]" + sub(t.elem)
    if t.kind is Kind.ARRAY:
        return f"[{t.length}]" + sub(t.elem)
    if t.kind is Kind.MAP:
        return f"map[{sub(t.key)}]{sub(t.elem)}"
    if t.name:
        if not t.pkg_path:
            return t.type_name
        pkg = t.pkg_path if qualified else _pkg_base(t.pkg_path)
        return f"{pkg}.{t.type_name}"
    if t.kind is Kind.STRUCT:
        if not t.fields:
            return "struct {}"
        body = "; ".join(f"{n} {sub(ft)}" for n, ft in t.fields)
        return f"struct {{ {body} }}"
    if t.kind is Kind.INTERFACE:
        return "interface {}"
    return t.kind.value


def _path_string(t: GoType) -> str:
    return _render(t, qualified=True)


@dataclass(frozen=True)
class GoFunc:
    """A Go function: where it lives, its name, parameters and results."""

    pkg_path: str
    name: str
    params: tuple[GoType, ...] = ()
    results: tuple[GoType, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))
        object.__setattr__(self, "results", tuple(self.results))

    @property
    def qualified_name(self) -> str:
        return f"{self.pkg_path}.{self.name}"


def named(
    pkg_path: str,
    name: str,
    type_args: Iterable[GoType] = (),
    kind: Kind = Kind.STRUCT,
    methods: Iterable[str] = (),
) -> GoType:
    """A defined type; ``methods`` is shared by the type and pointers to it."""
    if kind in _COMPOSITE_KINDS:
        raise ValueError(f"a named type cannot have kind {kind.value}")
    if not name:
        raise ValueError("a named type needs a name")
    return GoType(
        kind=kind,
        name=name,
        pkg_path=pkg_path,
        type_args=tuple(type_args),
        methods=frozenset(methods),
    )


def interface(
    pkg_path: str,
    name: str,
    type_args: Iterable[GoType] = (),
    methods: Iterable[str] = (),
) -> GoType:
    """A named interface type requiring ``methods``."""
    return named(pkg_path, name, type_args, Kind.INTERFACE, methods)


def builtin(name: str) -> GoType:
    """A predeclared type such as ``int`` or ``string``."""
    if not name:
        raise ValueError("a builtin type needs a name")
    return GoType(kind=Kind.BASIC, name=name)


def pointer(elem: GoType) -> GoType:
    return GoType(kind=Kind.POINTER, elem=elem)


def slice_of(elem: GoType) -> GoType:
    return GoType(kind=Kind.SLICE, elem=elem)


def array_of(elem: GoType, length: int) -> GoType:
    if length < 0:
        raise ValueError("array length must not be negative")
    return GoType(kind=Kind.ARRAY, elem=elem, length=length)


def map_of(key: GoType, value: GoType) -> GoType:
    return GoType(kind=Kind.MAP, key=key, elem=value)


def anonymous_struct(
    fields: Mapping[str, GoType] | Iterable[tuple[str, GoType]] = (),
) -> GoType:
    """An unnamed struct type with the given fields, in order."""
    pairs = fields.items() if isinstance(fields, Mapping) else fields
    return GoType(kind=Kind.STRUCT, fields=tuple((str(n), t) for n, t in pairs))