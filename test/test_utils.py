# -*- coding: utf-8 -*-

from typing import Any

from hypothesis import given
from pytest import raises

from coherence.python.additive import Either, Left, Right, Void
from coherence.strategies import values
from coherence.utils import *


def test_has_type():
    assert has_type(1, int) and not has_type("x", int)
    assert has_type((1, ("x", ())), tuple[int, tuple[str, tuple[()]]])
    assert not has_type((1, "x", True), tuple[int, str])
    assert has_type(Right(Left(1)), Either[str, Either[int, Void]])
    assert not has_type(Right(Right(1)), Either[str, Either[int, Void]])
    assert has_type(object(), Any)


def test_examples():
    assert list(examples(bool)) == [False, True]
    assert list(examples(tuple[()])) == [()]
    assert len(list(examples(tuple[int, tuple[str, bool]]))) == 4 * 3 * 2
    assert list(examples(Either[bool, tuple[()]]))\
        == [Left(False), Left(True), Right(())]
    assert list(examples(Void)) == []
    with raises(TypeError):
        examples(object)


def test_type_name():
    assert type_name(int) == "int"
    assert type_name(Left) == "python.additive.Left"
    assert type_name(tuple[int, str]) == "tuple[int, str]"


def test_assert_hastype():
    assert_hastype((1, "x"), tuple[int, str])
    with raises(TypeError):
        assert_hastype((1, 2), tuple[int, str])


def test_values_TypeError():
    with raises(TypeError):
        values(Either)
    with raises(TypeError):
        values(tuple[int, Either])


@given(values(Either[int, Void]))
def test_values_Void(value):
    assert isinstance(value, Left) and has_type(value, Either[int, Void])


@given(values(tuple[float, Either[str, tuple[()]]]))
def test_values(value):
    assert has_type(value, tuple[float, Either[str, tuple[()]]])
    assert value == value
