# dein

`dein` is a dependency injection code generator. You describe Go types and
the providers that build them; `dein` resolves the dependency graph and
produces the Go source of a `Container` struct and a `NewContainer` function
that builds every component in the right order.

## Modules

- `dein.gotype` — describing Go types and functions.
- `dein.api` — the provider helpers `p`, `pe`, `pf`, `pfe`, `bind`, plus
  `mark` and `register`.
- `dein.resolver` — `Resolver`, which orders the providers, and `ResolveError`.
- `dein.codegen` — `Generator`, whose `generate()` returns the source text.
- `dein.component`, `dein.symbols`, `dein.generators`, `dein.provider` and
  `dein.utils` — the building blocks used by the above.

## Describing types

Types are values built with the helpers in `dein.gotype`:

- `named(pkg_path, name, type_args=(), kind=Kind.STRUCT, methods=())` — a
  defined type. Its `methods` belong both to the type and to pointers to it.
- `interface(pkg_path, name, type_args=(), methods=())` — a named interface
  requiring the given methods.
- `builtin(name)`, `pointer(elem)`, `slice_of(elem)`, `array_of(elem, length)`,
  `map_of(key, value)` and `anonymous_struct(fields)`.

`GoType.implements(iface)` compares method sets; `str()` of a type gives its
short Go spelling, such as `*b.B`.

Functions are described with `GoFunc(pkg_path, name, params, results)`.

Only named types from a package can be components, possibly behind pointers,
slices or arrays. Maps, builtins, anonymous structs, and generic types whose
type arguments are anonymous structs or maps are rejected with a
`dein.component.ComponentError`.

## Providers

- `p(func)` — call the named constructor `func`, which returns the component.
- `pe(func)` — the same, for a constructor that also returns an `error`.
- `pf(result, *args)` — a function handed to `NewContainer` as a parameter
  named `__func<Name>`, taking `args` and returning `result`.
- `pfe(result, *args)` — the same, for a function that also returns an `error`.
- `bind(impl, iface)` — provide the interface `iface` from a component of type
  `impl`.

Each helper accepts at most nine arguments and raises `TypeError` beyond that.
A provider that cannot be built (a bind target that is not an interface, an
implementation that lacks the interface's methods, a constructor whose name
contains a dot, a constructor with no result, an unsupported type) records the
error; it is raised by `Provider.check_error()` and therefore by
`Resolver.resolve()`.

`mark(provider)` exposes the provider's component as a field and accessor
method on the generated `Container`. `register(resolver, provider)` adds a
provider to a `Resolver`.

Any component that some provider needs but none provides becomes a parameter
of `NewContainer`.

## Example

```python
from dein.api import mark, pf, register
from dein.gotype import interface
from dein.resolver import Resolver

logger = interface("example.com/app/logging", "Logger")
store = interface("example.com/app/store", "Store")

resolver = Resolver("main")
register(resolver, mark(pf(store, logger)))

print(resolver.resolve().generate())
```

prints:

```go
// Code generated by dein. DO NOT EDIT.
package main

import (
logging "example.com/app/logging"
store_2 "example.com/app/store"
)

type Container struct {
store store_2.Store
}

func (c *Container) Store() store_2.Store {
return c.store
}


func NewContainer(
logger logging.Logger,
__funcStore func(logging.Logger) (store_2.Store),
) (*Container, error) {
	__c := &Container{}

store := __funcStore(logger)
__c.store = store


	return __c, nil
}
```

The package alias for `example.com/app/store` became `store_2` because the
variable `store` had already taken the name.

## Ordering and naming

Providers are emitted in dependency order; among providers that are ready at
the same time, the one whose component sorts first (by package path, then
type name, then pointer/slice prefix) comes first. Container fields and
parameters for unprovided components are sorted the same way, followed by the
`__func…` parameters of function providers in emission order. Imports are
sorted by path, and the target package itself is never imported: its types
and constructors are written unqualified.

Variable names are the component's type name with a lower-case first letter;
package aliases are the last element of the package path. The last element of
the target package path is reserved. Clashing names receive `_2`, `_3`, …
suffixes.

## Errors

`Resolver.resolve()` raises:

- the error recorded by any provider that could not be built
  (`ComponentError` or `dein.provider.ProviderError`);
- `ResolveError("duplicate component provided")` when two providers yield the
  same component;
- `ResolveError("circular dependency detected")` when providers depend on one
  another in a cycle.

## What it does not do

`dein` has no command-line tool and does not read Go source: types and
constructors are described by hand with `dein.gotype`. It returns the
generated source as a string; it does not write files, and the text is not
formatted, so pass it through a Go formatter before committing it.