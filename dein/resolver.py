"""Resolution of the provider dependency graph."""

from __future__ import annotations

from dein.codegen import Generator
from dein.component import Component
from dein.generators import (
    ArgumentGenerator,
    ComponentArgumentGenerator,
    ContainerGenerator,
)
from dein.provider import Provider
from dein.symbols import Symbols
from dein.utils import PriorityQueue


class ResolveError(ValueError):
    """Raised when the providers do not form a valid dependency graph."""


class Resolver:
    """Collects providers and orders them into a source code generator."""

    def __init__(self, dist_pkg_path: str) -> None:
        self.dist_pkg_path = dist_pkg_path
        self.providers: list[Provider] = []

    def register(self, provider: Provider) -> None:
        self.providers.append(provider)

    def resolve(self) -> Generator:
        """Topologically sort the providers and build a generator."""
        for p in self.providers:
            p.check_error()

        by_out: dict[Component, Provider] = {}
        graph: dict[Component, list[Component]] = {}
        indegrees: dict[Component, int] = {}
        for p in self.providers:
            assert p.out is not None
            if p.out in graph:
                raise ResolveError("duplicate component provided")
            by_out[p.out] = p
            graph[p.out] = []
            indegrees[p.out] = 0

        argument_components: list[Component] = []
        for p in self.providers:
            assert p.out is not None
            for c in p.inputs:
                if c not in graph:
                    argument_components.append(c)
                    continue
                graph[c].append(p.out)
                indegrees[p.out] += 1

        queue: PriorityQueue[Provider] = PriorityQueue(
            lambda x, y: x.out.less(y.out)
        )
        for c, degree in indegrees.items():
            if degree == 0:
                queue.push(by_out[c])

        resolved: list[Provider] = []
        while queue:
            current = queue.pop()
            resolved.append(current)
            for to in graph[current.out]:
                indegrees[to] -= 1
                if indegrees[to] == 0:
                    queue.push(by_out[to])

        if len(resolved) != len(graph):
            raise ResolveError("circular dependency detected")

        components: list[Component] = []
        pkg_paths: list[str] = []
        for p in by_out.values():
            components.extend(p.inputs)
            components.append(p.out)
            pkg_paths.extend(p.pkg_paths)
        symbols = Symbols(self.dist_pkg_path, components, pkg_paths)

        bodies = [p.generator(symbols) for p in resolved]
        exposed = sorted(p.out for p in resolved if p.mark_exposed)
        containers = [ContainerGenerator(symbols, c) for c in exposed]

        arguments: list[ArgumentGenerator] = [
            ComponentArgumentGenerator(symbols, c) for c in sorted(argument_components)
        ]
        arguments.extend(g for g in bodies if isinstance(g, ArgumentGenerator))

        return Generator(symbols, containers, arguments, bodies)