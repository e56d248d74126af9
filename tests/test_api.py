import re

import pytest

from dein.api import bind, mark, p, pe, pf, pfe, register
from dein.gotype import GoFunc, builtin, interface, named, pointer
from dein.resolver import Resolver

ROOT = "example.com/dein/internal/testpackages"
PA = f"{ROOT}/a"
PB = f"{ROOT}/b"
PC = f"{ROOT}/c"

A1 = named(PA, "A1")
A2 = named(PA, "A2")
IA1 = interface(PA, "IA1", methods=["A1"])
B = named(PB, "B", methods=["A1"])
C = named(PC, "C")
INT = builtin("int")
STRING = builtin("string")


def A3(t):
    return named(PA, "A3", [t])


def A4(t, u):
    return named(PA, "A4", [t, u])


NEW_A1 = GoFunc(PA, "NewA1", (), (A1,))
NEW_A2 = GoFunc(PA, "NewA2", (A1, pointer(A1)), (A2,))
NEW_B = GoFunc(PB, "NewB", (A1,), (pointer(B),))
NEW_C2 = GoFunc(PC, "NewC2", (IA1, A4(INT, STRING)), (pointer(C), builtin("error")))

HEADER = ("// Code generated by dein. DO NOT EDIT.",)
OPEN = ("__c := &Container{}",)
CLOSE = ("return __c, nil", "}")
ERR_CHECK = ("if err != nil {", "return nil, err", "}")


def _normalize(text):
    return re.sub(r"[\s()]", "", text)


def _imports(*aliases):
    paths = {"a": PA, "b": PB, "c": PC}
    return ("import (",) + tuple(
        f'{alias} "{paths[alias.split("_")[0]]}"' for alias in aliases
    ) + (")",)


def _complex(r):
    register(r, pf(pointer(B), A1, A3(INT)))
    register(r, pf(A4(INT, STRING), A1))
    register(r, p(NEW_A1))
    register(r, bind(pointer(B), IA1))
    register(r, mark(pe(NEW_C2)))


GOLDEN = {
    "constructor provider with no args": (
        "main",
        lambda r: register(r, mark(p(NEW_A1))),
        HEADER
        + ("package main",)
        + _imports("a")
        + ("type Container struct {", "a1 a.A1", "}")
        + ("func (c *Container) A1() a.A1 {", "return c.a1", "}")
        + ("func NewContainer() (*Container, error) {",)
        + OPEN
        + ("a1 := a.NewA1()", "__c.a1 = a1")
        + CLOSE,
    ),
    "constructor provider with one args": (
        "main",
        lambda r: (register(r, mark(p(NEW_B))), register(r, p(NEW_A1))),
        HEADER
        + ("package main",)
        + _imports("a", "b_2")
        + ("type Container struct {", "b *b_2.B", "}")
        + ("func (c *Container) B() *b_2.B {", "return c.b", "}")
        + ("func NewContainer() (*Container, error) {",)
        + OPEN
        + ("a1 := a.NewA1()", "b := b_2.NewB(a1)", "__c.b = b")
        + CLOSE,
    ),
    "constructor provider with two args": (
        "main",
        lambda r: (register(r, mark(p(NEW_A2))), register(r, p(NEW_A1))),
        HEADER
        + ("package main",)
        + _imports("a")
        + ("type Container struct {", "a2 a.A2", "}")
        + ("func (c *Container) A2() a.A2 {", "return c.a2", "}")
        + ("func NewContainer(", "a1_2 *a.A1,", ") (*Container, error) {")
        + OPEN
        + ("a1 := a.NewA1()", "a2 := a.NewA2(a1, a1_2)", "__c.a2 = a2")
        + CLOSE,
    ),
    "binding provider with no implementation": (
        "main",
        lambda r: register(r, bind(B, IA1)),
        HEADER
        + ("package main",)
        + _imports("a", "b_2")
        + ("type Container struct {", "}")
        + ("func NewContainer(", "b b_2.B,", ") (*Container, error) {")
        + OPEN
        + ("var iA1 a.IA1 = b",)
        + CLOSE,
    ),
    "binding provider with implementation": (
        "main",
        lambda r: (register(r, bind(B, IA1)), register(r, p(NEW_B))),
        HEADER
        + ("package main",)
        + _imports("a", "b_3")
        + ("type Container struct {", "}")
        + ("func NewContainer(", "a1 a.A1,", "b b_3.B,", ") (*Container, error) {")
        + OPEN
        + ("var iA1 a.IA1 = b", "b_2 := b_3.NewB(a1)")
        + CLOSE,
    ),
    "function provider with no args": (
        "main",
        lambda r: register(r, mark(pf(B, A1, A3(INT)))),
        HEADER
        + ("package main",)
        + _imports("a", "b_2")
        + ("type Container struct {", "b b_2.B", "}")
        + ("func (c *Container) B() b_2.B {", "return c.b", "}")
        + (
            "func NewContainer(",
            "a1 a.A1,",
            "a3 a.A3[int],",
            "__funcB func(a.A1, a.A3[int]) b_2.B,",
            ") (*Container, error) {",
        )
        + OPEN
        + ("b := __funcB(a1, a3)", "__c.b = b")
        + CLOSE,
    ),
    "function provider with one args": (
        "main",
        lambda r: (register(r, mark(pf(B, A1, A3(INT)))), register(r, p(NEW_A1))),
        HEADER
        + ("package main",)
        + _imports("a", "b_2")
        + ("type Container struct {", "b b_2.B", "}")
        + ("func (c *Container) B() b_2.B {", "return c.b", "}")
        + (
            "func NewContainer(",
            "a3 a.A3[int],",
            "__funcB func(a.A1, a.A3[int]) b_2.B,",
            ") (*Container, error) {",
        )
        + OPEN
        + ("a1 := a.NewA1()", "b := __funcB(a1, a3)", "__c.b = b")
        + CLOSE,
    ),
    "complex case with multiple dependencies": (
        "main",
        _complex,
        HEADER
        + ("package main",)
        + _imports("a", "b_2", "c_2")
        + ("type Container struct {", "c *c_2.C", "}")
        + ("func (c *Container) C() *c_2.C {", "return c.c", "}")
        + (
            "func NewContainer(",
            "a3 a.A3[int],",
            "__funcA4 func(a.A1) a.A4[int, string],",
            "__funcB func(a.A1, a.A3[int]) *b_2.B,",
            ") (*Container, error) {",
        )
        + OPEN
        + (
            "a1 := a.NewA1()",
            "a4 := __funcA4(a1)",
            "b := __funcB(a1, a3)",
            "var iA1 a.IA1 = b",
            "c, err := c_2.NewC2(iA1, a4)",
        )
        + ERR_CHECK
        + ("__c.c = c",)
        + CLOSE,
    ),
    "complex case with multiple dependencies dist to testpackages c": (
        PC,
        _complex,
        HEADER
        + ("package c",)
        + _imports("a", "b_2")
        + ("type Container struct {", "c_2 *C", "}")
        + ("func (c *Container) C_2() *C {", "return c.c_2", "}")
        + (
            "func NewContainer(",
            "a3 a.A3[int],",
            "__funcA4 func(a.A1) a.A4[int, string],",
            "__funcB func(a.A1, a.A3[int]) *b_2.B,",
            ") (*Container, error) {",
        )
        + OPEN
        + (
            "a1 := a.NewA1()",
            "a4 := __funcA4(a1)",
            "b := __funcB(a1, a3)",
            "var iA1 a.IA1 = b",
            "c_2, err := NewC2(iA1, a4)",
        )
        + ERR_CHECK
        + ("__c.c_2 = c_2",)
        + CLOSE,
    ),
}


@pytest.mark.parametrize("case", sorted(GOLDEN))
def test_golden(case):
    pkg, setup, want_lines = GOLDEN[case]
    r = Resolver(pkg)
    setup(r)
    got = r.resolve().generate()
    assert _normalize(got) == _normalize("\n".join(want_lines))


def test_too_many_function_arguments():
    with pytest.raises(TypeError):
        pfe(A1, *([B] * 10))


def test_mark_sets_exposed():
    assert mark(p(NEW_A1)).mark_exposed is True