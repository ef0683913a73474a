# -*- coding: utf-8 -*-

from hypothesis import given, strategies as st
from pytest import mark, raises

from coherence.monoidal import *
from coherence.python import multiplicative, additive, Function
from coherence.strategies import samples

CATEGORIES = [multiplicative.Category(), additive.Category()]

succ = Function(lambda n: n + 1, int, int)
size = Function(len, str, int)
show = Function(str, int, str)
even = Function(lambda n: n % 2 == 0, int, bool)
negate = Function(lambda b: not b, bool, bool)


def test_abstract():
    with raises(TypeError):
        Category()


@mark.parametrize("C", CATEGORIES)
@given(data=st.data())
def test_bimap_identity(C, data):
    fa = data.draw(samples(C, "bimap_identity", int, str))
    assert C.bimap_identity(fa, int, str)


@mark.parametrize("C", CATEGORIES)
@given(data=st.data())
def test_bimap_composition(C, data):
    fa = data.draw(samples(C, "bimap_composition", succ, size, show, even))
    assert C.bimap_composition(fa, succ, size, show, even)


@mark.parametrize("C", CATEGORIES)
@given(data=st.data())
def test_unitor_inverse(C, data):
    fa = data.draw(samples(C, "right_unitor_inverse", int))
    assert C.right_unitor_inverse(fa, int)
    fa = data.draw(samples(C, "left_unitor_inverse", str))
    assert C.left_unitor_inverse(fa, str)


@mark.parametrize("C", CATEGORIES)
@given(data=st.data())
def test_associator_inverse(C, data):
    fa = data.draw(samples(C, "associator_inverse", int, str, bool))
    assert C.associator_inverse(fa, int, str, bool)


@mark.parametrize("C", CATEGORIES)
@given(data=st.data())
def test_naturality(C, data):
    fa = data.draw(samples(C, "right_unitor_naturality", size))
    assert C.right_unitor_naturality(fa, size)
    fa = data.draw(samples(C, "left_unitor_naturality", even))
    assert C.left_unitor_naturality(fa, even)
    fa = data.draw(samples(C, "associator_naturality", succ, size, negate))
    assert C.associator_naturality(fa, succ, size, negate)


@mark.parametrize("C", CATEGORIES)
@given(data=st.data())
def test_triangle_equations(C, data):
    fa = data.draw(samples(C, "triangle_equations", int, str))
    assert C.triangle_equations(fa, int, str)


@mark.parametrize("C", CATEGORIES)
@given(data=st.data())
def test_pentagon_equations(C, data):
    fa = data.draw(samples(C, "pentagon_equations", int, str, bool, int))
    assert C.pentagon_equations(fa, int, str, bool, int)


@mark.parametrize("C", CATEGORIES)
def test_triangle(C):
    triangle = C.triangle(int, str)
    assert triangle.source == "(x @ I) @ y"
    assert triangle.ob("x @ y") == C.tensor(int, str)
    assert len(triangle.paths("(x @ I) @ y", "x @ y")) == 2
    assert len(list(triangle.equations())) == 1


@mark.parametrize("C", CATEGORIES)
def test_pentagon(C):
    pentagon = C.pentagon(int, str, bool, int)
    assert len(pentagon.graph) == len(pentagon.graph.edges) == 5
    assert len(list(pentagon.equations())) == 1
    assert pentagon.ob("w @ (x @ (y @ z))")\
        == C.tensor(int, C.tensor(str, C.tensor(bool, int)))


def test_product_pentagon():
    C = multiplicative.Category()
    fa = (((1, "x"), True), 2)
    left, right = C.pentagon(int, str, bool, int).paths(
        "((w @ x) @ y) @ z", "w @ (x @ (y @ z))")
    assert left(fa) == right(fa) == (1, ("x", (True, 2)))


def test_coproduct_pentagon():
    C = additive.Category()
    Left, Right = additive.Left, additive.Right
    for fa, result in [
            (Left(Left(Left(1))), Left(1)),
            (Left(Left(Right("x"))), Right(Left("x"))),
            (Left(Right(True)), Right(Right(Left(True)))),
            (Right(2), Right(Right(Right(2))))]:
        assert C.pentagon_equations(fa, int, str, bool, int)
        assert C.associator(C.tensor(int, str), bool, int)\
            .then(C.associator(int, str, C.tensor(bool, int)))(fa) == result


def test_broken_associator():
    class Broken(multiplicative.Category):
        def associator_inv(self, x, y, z):
            return self.ar(
                lambda triple: ((triple[1][0], triple[0]), triple[1][1]),
                self.tensor(x, self.tensor(y, z)),
                self.tensor(self.tensor(x, y), z))

    C = Broken()
    assert C.associator_inverse(((1, 1), 2), int, int, int)
    assert not C.associator_inverse(((1, 2), 3), int, int, int)


def test_laws():
    laws = multiplicative.Category.laws()
    assert laws[:6] == [
        'left_identity', 'right_identity', 'associativity', 'inverse',
        'bimap_identity', 'bimap_composition']
    assert laws.index('pentagon_equations')\
        < laws.index('left_hexagon_equations')
