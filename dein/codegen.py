"""Rendering of the whole generated container source file."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from dein.generators import ArgumentGenerator, BodyGenerator, ContainerGenerator
from dein.symbols import Symbols


@dataclass(frozen=True)
class Generator:
    """Produces the source of the container for a resolved provider graph."""

    symbols: Symbols
    container_generators: Sequence[ContainerGenerator] = ()
    argument_generators: Sequence[ArgumentGenerator] = ()
    body_generators: Sequence[BodyGenerator] = ()

    def generate(self) -> str:
        imports = "".join(f'{n} "{p}"\n' for n, p in self.symbols.imports())
        fields = "".join(g.generate_field() + "\n" for g in self.container_generators)
        methods = "".join(g.generate_method() + "\n" for g in self.container_generators)
        arguments = "".join(
            g.generate_argument() + ",\n" for g in self.argument_generators
        )
        bodies = "".join(g.generate_body() + "\n" for g in self.body_generators)
        return (
            "// Code generated by dein. DO NOT EDIT.\n"
            f"package {self.symbols.dist_pkg_name()}\n\n"
            f"import (\n{imports})\n\n"
            f"type Container struct {{\n{fields}}}\n\n"
            f"{methods}\n\n"
            f"func NewContainer(\n{arguments}) (*Container, error) {{\n"
            "\t__c := &Container{}\n\n"
            f"{bodies}\n\n"
            "\treturn __c, nil\n}\n"
        )