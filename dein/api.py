"""Public entry points for describing providers and registering them."""

from __future__ import annotations

from dein import provider as _provider
from dein.gotype import GoFunc, GoType
from dein.provider import Provider
from dein.resolver import Resolver

MAX_ARGS = 9


def _check_arity(count: int) -> None:
    if count > MAX_ARGS:
        raise TypeError(f"at most {MAX_ARGS} arguments are supported, got {count}")


def register(resolver: Resolver, provider: Provider) -> None:
    """Register ``provider`` with ``resolver``."""
    resolver.register(provider)


def mark(provider: Provider) -> Provider:
    """Mark ``provider`` so its component is exposed on the container."""
    return _provider.mark(provider)


def bind(impl: GoType, iface: GoType) -> Provider:
    """Provide interface ``iface`` from an implementation of type ``impl``."""
    return _provider.new_bind_provider(iface, impl)


def p(func: GoFunc) -> Provider:
    """Provide a component from a constructor returning it."""
    _check_arity(len(func.params))
    return _provider.new_constructor_provider(func, False)


def pe(func: GoFunc) -> Provider:
    """Provide a component from a constructor returning it or an error."""
    _check_arity(len(func.params))
    return _provider.new_constructor_provider(func, True)


def pf(result: GoType, *args: GoType) -> Provider:
    """Provide ``result`` from a function supplied when building the container."""
    _check_arity(len(args))
    return _provider.new_function_provider(result, False, *args)


def pfe(result: GoType, *args: GoType) -> Provider:
    """Like :func:`pf`, for a function that may also return an error."""
    _check_arity(len(args))
    return _provider.new_function_provider(result, True, *args)