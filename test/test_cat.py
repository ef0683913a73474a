# -*- coding: utf-8 -*-

from hypothesis import given, strategies as st
from pytest import raises

from coherence.cat import *
from coherence.python.function import Function
from coherence.utils import AxiomError

C = Category(type, Function)
f = Function(len, str, int)
g = Function(lambda n: n + 1, int, int)
h = Function(str, int, str)


def test_Category():
    assert C == Category(type, Function) != Category(object, Function)
    assert {C: 42}[Category(type, Function)] == 42
    assert repr(C) == "Category(type, python.function.Function)"


def test_id():
    assert C.id(int)(42) == 42
    assert C.id(int).dom == C.id(int).cod == int


def test_compose():
    assert C.compose(g, f)("xyz") == C.then(f, g)("xyz") == 4
    assert C.compose(g, f).dom == str and C.compose(g, f).cod == int
    assert C.then(f, g, g, h)("xy") == "4"


def test_AxiomError():
    with raises(AxiomError):
        C.compose(f, g)
    with raises(AxiomError):
        C.then(h, h)


@given(st.text())
def test_identity(s):
    assert C.left_identity(s, f) and C.right_identity(s, f)


@given(st.text())
def test_associativity(s):
    assert C.associativity(s, h, g, f)


@given(st.integers())
def test_inverse(n):
    pred = Function(lambda n: n - 1, int, int)
    assert C.inverse(n, g, pred) and C.inverse(n, pred, g)
    assert not C.inverse(n, g, g)


def test_laws():
    assert Category.laws() == [
        'left_identity', 'right_identity', 'associativity', 'inverse']


def test_law_violation_is_not_an_exception():
    class Broken(Category):
        def id(self, dom):
            return self.ar(lambda x: x + x, dom, dom)

    assert not Broken(type, Function).left_identity("xy", f)
    assert Broken(type, Function).right_identity("xy", f) is False
