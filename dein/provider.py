"""Providers: descriptions of how a component is produced."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from dein.component import Component, ComponentError, new_component
from dein.generators import (
    BindGenerator,
    BodyGenerator,
    ConstructorGenerator,
    FunctionGenerator,
)
from dein.gotype import GoFunc, GoType, Kind
from dein.symbols import Symbols
from dein.utils import uniq

_BuildGenerator = Callable[[Symbols, bool], BodyGenerator]


class ProviderError(ValueError):
    """Raised when a provider cannot be built from what it was given."""


@dataclass
class Provider:
    """A component's inputs and output, and how to generate the code building it.

    A provider that could not be built carries its ``error`` instead; it is
    raised by :meth:`check_error`.
    """

    inputs: tuple[Component, ...] = ()
    out: Component | None = None
    pkg_paths: list[str] = field(default_factory=list)
    mark_exposed: bool = False
    error: Exception | None = None
    _build: _BuildGenerator | None = field(default=None, repr=False, compare=False)

    def generator(self, symbols: Symbols) -> BodyGenerator:
        """The body generator for this provider, using ``symbols`` for names."""
        self.check_error()
        assert self._build is not None
        return self._build(symbols, self.mark_exposed)

    def check_error(self) -> None:
        """Raise the error recorded when the provider was built, if any."""
        if self.error is not None:
            raise self.error


def _failed(error: Exception) -> Provider:
    return Provider(error=error)


def _components(types: Iterable[GoType]) -> list[Component]:
    return [new_component(t) for t in types]


def _collect_paths(inputs: Iterable[Component], out: Component) -> list[str]:
    paths = [p for c in inputs for p in c.pkg_paths()]
    return uniq([*paths, *out.pkg_paths()])


def new_bind_provider(iface: GoType, impl: GoType) -> Provider:
    """A provider that binds the implementation ``impl`` to interface ``iface``."""
    if iface.kind is not Kind.INTERFACE:
        return _failed(ProviderError("bind target must be an interface"))
    if not impl.implements(iface):
        return _failed(
            ProviderError(f"{impl} must implement the interface {iface}")
        )
    try:
        in_c = new_component(impl)
        out_c = new_component(iface)
    except ComponentError as exc:
        return _failed(exc)

    def build(symbols: Symbols, mark_exposed: bool) -> BodyGenerator:
        return BindGenerator(symbols, out_c, in_c, mark_exposed)

    return Provider(
        inputs=(in_c,),
        out=out_c,
        pkg_paths=uniq([*in_c.pkg_paths(), *out_c.pkg_paths()]),
        _build=build,
    )


def new_constructor_provider(func: GoFunc, has_error: bool) -> Provider:
    """A provider that calls the named constructor ``func``."""
    if not isinstance(func, GoFunc):
        return _failed(ProviderError("allow only function"))

    name = func.name.removesuffix("[...]")
    if "." in name:
        return _failed(ProviderError("anonymous function is not allowed"))
    if not func.results:
        return _failed(ProviderError("function must return a value"))

    try:
        inputs = tuple(_components(func.params))
        out_c = new_component(func.results[0])
    except ComponentError as exc:
        return _failed(exc)

    pkg_path = func.pkg_path

    def build(symbols: Symbols, mark_exposed: bool) -> BodyGenerator:
        return ConstructorGenerator(
            symbols, inputs, out_c, name, pkg_path, has_error, mark_exposed
        )

    return Provider(
        inputs=inputs,
        out=out_c,
        pkg_paths=_collect_paths(inputs, out_c),
        _build=build,
    )


def new_function_provider(result: GoType, has_error: bool, *args: GoType) -> Provider:
    """A provider built by a function handed to the container at build time."""
    try:
        inputs = tuple(_components(args))
        out_c = new_component(result)
    except ComponentError as exc:
        return _failed(exc)

    def build(symbols: Symbols, mark_exposed: bool) -> BodyGenerator:
        return FunctionGenerator(symbols, inputs, out_c, has_error, mark_exposed)

    return Provider(
        inputs=inputs,
        out=out_c,
        pkg_paths=_collect_paths(inputs, out_c),
        _build=build,
    )


def mark(provider: Provider) -> Provider:
    """Expose the provider's component on the container."""
    provider.mark_exposed = True
    return provider