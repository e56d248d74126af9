"""Generators for the individual pieces of the generated container source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from dein.component import Component, TypeParam
from dein.symbols import Symbols
from dein.utils import head_to_upper

ERROR_HANDLING = "\nif err != nil{\n\treturn nil, err\n}"


class ArgumentGenerator(ABC):
    """Something that contributes a parameter to the container constructor."""

    @abstractmethod
    def generate_argument(self) -> str:
        """Return the parameter declaration, e.g. ``a1 a.A1``."""


class BodyGenerator(ABC):
    """Something that contributes statements to the container constructor body."""

    @abstractmethod
    def generate_body(self) -> str:
        """Return the statements that build one component."""


def _qualify(symbols: Symbols, pkg_path: str, name: str) -> str:
    alias = symbols.pkg_name(pkg_path)
    return f"{alias}.{name}" if alias else name


def type_params_text(symbols: Symbols, params: Iterable[TypeParam]) -> str:
    """Render type arguments as ``[x.T, *y.U]``, or nothing when there are none."""
    rendered = [
        p.prefix
        + _qualify(symbols, p.pkg_path, p.name)
        + type_params_text(symbols, p.type_params())
        for p in params
    ]
    if not rendered:
        return ""
    return "[" + ", ".join(rendered) + "]"


def _bare_type(symbols: Symbols, c: Component) -> str:
    return _qualify(symbols, c.pkg_path, c.name) + type_params_text(
        symbols, c.type_params()
    )


def _full_type(symbols: Symbols, c: Component) -> str:
    return c.prefix + _bare_type(symbols, c)


def _expose(symbols: Symbols, c: Component) -> str:
    var = symbols.var_name(c)
    return f"\n__c.{var} = {var}"


def _call_args(symbols: Symbols, inputs: Iterable[Component]) -> str:
    return ", ".join(symbols.var_name(c) for c in inputs)


@dataclass(frozen=True)
class BindGenerator(BodyGenerator):
    """Assigns an implementation to a variable of an interface type."""

    symbols: Symbols
    bind_to: Component
    implement: Component
    mark_exposed: bool = False

    def generate_body(self) -> str:
        text = (
            f"var {self.symbols.var_name(self.bind_to)} "
            f"{_bare_type(self.symbols, self.bind_to)} = "
            f"{self.symbols.var_name(self.implement)}"
        )
        if self.mark_exposed:
            text += _expose(self.symbols, self.bind_to)
        return text


@dataclass(frozen=True)
class ComponentArgumentGenerator(ArgumentGenerator):
    """A constructor parameter for a component nobody provides."""

    symbols: Symbols
    component: Component

    def generate_argument(self) -> str:
        return (
            f"{self.symbols.var_name(self.component)} "
            f"{_full_type(self.symbols, self.component)}"
        )


@dataclass(frozen=True)
class ConstructorGenerator(BodyGenerator):
    """Calls a named constructor function to build a component."""

    symbols: Symbols
    inputs: tuple[Component, ...]
    out: Component
    constructor_name: str
    constructor_pkg_path: str
    has_error: bool = False
    mark_exposed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))

    def generate_body(self) -> str:
        target = self.symbols.var_name(self.out)
        if self.has_error:
            target += ", err"
        func = _qualify(self.symbols, self.constructor_pkg_path, self.constructor_name)
        text = f"{target} := {func}({_call_args(self.symbols, self.inputs)})"
        if self.has_error:
            text += ERROR_HANDLING
        if self.mark_exposed:
            text += _expose(self.symbols, self.out)
        return text


@dataclass(frozen=True)
class ContainerGenerator:
    """A field of the container struct and its accessor method."""

    symbols: Symbols
    component: Component

    def generate_field(self) -> str:
        return (
            f"{self.symbols.var_name(self.component)} "
            f"{_full_type(self.symbols, self.component)}"
        )

    def generate_method(self) -> str:
        var = self.symbols.var_name(self.component)
        return (
            f"func (c *Container) {head_to_upper(var)}() "
            f"{_full_type(self.symbols, self.component)} {{\n"
            f"return c.{var}\n}}"
        )


@dataclass(frozen=True)
class FunctionGenerator(ArgumentGenerator, BodyGenerator):
    """A component built by a function passed to the container constructor."""

    symbols: Symbols
    inputs: tuple[Component, ...]
    out: Component
    has_error: bool = False
    mark_exposed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))

    def _func_name(self) -> str:
        return "__func" + head_to_upper(self.symbols.var_name(self.out))

    def generate_argument(self) -> str:
        params = ", ".join(_full_type(self.symbols, c) for c in self.inputs)
        result = _full_type(self.symbols, self.out)
        if self.has_error:
            result += ", error"
        return f"{self._func_name()} func({params}) ({result})"

    def generate_body(self) -> str:
        target = self.symbols.var_name(self.out)
        if self.has_error:
            target += ", err"
        text = f"{target} := {self._func_name()}({_call_args(self.symbols, self.inputs)})"
        if self.has_error:
            text += ERROR_HANDLING
        if self.mark_exposed:
            text += _expose(self.symbols, self.out)
        return text