"""Naming of variables and package imports in generated code."""

from __future__ import annotations

from collections.abc import Iterable

from dein.component import Component
from dein.utils import head_to_lower, uniq


def _path_base(path: str) -> str:
    if not path:
        return "."
    path = path.rstrip("/")
    if not path:
        return "/"
    return path.rsplit("/", 1)[-1]


class _Namer:
    """Hands out identifiers, suffixing ``_N`` on collisions."""

    def __init__(self, *reserved: str) -> None:
        self._names: set[str] = set(reserved)
        self._count: dict[str, int] = {name: 1 for name in reserved}

    def name(self, name: str) -> str:
        if name not in self._names:
            self._names.add(name)
            self._count[name] = 1
            return name

        count = self._count.get(name, 1)
        offset = 1
        while f"{name}_{count + offset}" in self._names:
            offset += 1

        self._count[name] = count + offset
        new_name = f"{name}_{self._count[name]}"
        self._names.add(new_name)
        return new_name


class Symbols:
    """Unique variable names for components and aliases for imported packages."""

    def __init__(
        self,
        dist_pkg_path: str,
        components: Iterable[Component],
        pkg_paths: Iterable[str],
    ) -> None:
        self._dist_pkg_path = dist_pkg_path

        ordered = sorted(uniq(components))
        paths = [p for c in ordered for p in c.pkg_paths()]
        self._ordered_pkg_paths = sorted(uniq([*paths, *pkg_paths]))

        namer = _Namer(_path_base(dist_pkg_path))
        self._var_names = {c: namer.name(head_to_lower(c.name)) for c in ordered}
        self._pkg_names = {
            p: namer.name(_path_base(p))
            for p in self._ordered_pkg_paths
            if p != dist_pkg_path
        }

    def dist_pkg_name(self) -> str:
        return _path_base(self._dist_pkg_path)

    def var_name(self, component: Component) -> str:
        """The variable name of ``component``, or an empty string if unknown."""
        return self._var_names.get(component, "")

    def pkg_name(self, pkg_path: str) -> str:
        """The import alias of ``pkg_path``; empty for builtins and the target package."""
        if not pkg_path or pkg_path == self._dist_pkg_path:
            return ""
        return self._pkg_names.get(pkg_path, "")

    def imports(self) -> list[tuple[str, str]]:
        """``(alias, path)`` pairs in path order, excluding the target package."""
        return [
            (self._pkg_names[p], p)
            for p in self._ordered_pkg_paths
            if p != self._dist_pkg_path
        ]