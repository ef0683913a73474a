# -*- coding: utf-8 -*-

"""
The category of Python functions with disjoint union as monoidal product.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Either
    Left
    Right
    Void
    Category

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        either
        absurd

Example
-------
>>> C = Category()
>>> C.associator(int, str, bool)(Left(Left(1)))
Left(1)
>>> C.associator(int, str, bool)(Left(Right("x")))
Right(Left('x'))
>>> C.braid(int, str)(Left(1))
Right(1)

The unit is uninhabited, so unitors never reach their :code:`Void` branch.

>>> from pytest import raises
>>> with raises(TypeError):
...     Void()
>>> with Function.no_type_checking:
...     with raises(AssertionError):
...         C.right_unitor(int)(Right(42))
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Iterator, NoReturn, TypeVar

from coherence import messages, symmetric
from coherence.python.function import Function
from coherence.utils import (
    assert_isinstance, examples, factory_name, has_type)

A, B = TypeVar('A'), TypeVar('B')


class Either(Generic[A, B]):
    """
    The disjoint union of two types, with values either :class:`Left` or
    :class:`Right`.

    Example
    -------
    >>> assert has_type(Left(1), Either[int, str])
    >>> assert not has_type(Right(1), Either[int, str])
    >>> list(examples(Either[bool, Void]))
    [Left(False), Left(True)]
    """
    @classmethod
    def has_type(cls, value: Any, left: Any = Any, right: Any = Any) -> bool:
        """ Whether a value is a :class:`Left` of ``left`` or a
        :class:`Right` of ``right``. """
        if not isinstance(value, cls):
            return False
        if isinstance(value, Left):
            return has_type(value.value, left)
        return isinstance(value, Right) and has_type(value.value, right)

    @classmethod
    def examples(cls, left: Any = Any, right: Any = Any) -> Iterator[Either]:
        """ The examples of ``left`` then those of ``right``, tagged. """
        return itertools.chain(
            map(Left, examples(left)), map(Right, examples(right)))


@dataclass(frozen=True, repr=False)
class Left(Either[A, B]):
    """ The left injection into a disjoint union. """
    value: A

    def __repr__(self):
        return f"Left({self.value!r})"


@dataclass(frozen=True, repr=False)
class Right(Either[A, B]):
    """ The right injection into a disjoint union. """
    value: B

    def __repr__(self):
        return f"Right({self.value!r})"


class Void:
    """ The uninhabited type, i.e. the unit of disjoint union. """
    def __new__(cls, *args, **kwargs):
        raise TypeError(messages.UNINHABITED.format(factory_name(cls)))

    @classmethod
    def examples(cls) -> Iterator[NoReturn]:
        return iter(())


def absurd(value: Void) -> NoReturn:
    """
    The unique function out of :class:`Void`, i.e. an unreachable branch.

    Raises:
        AssertionError : Whenever it is reached.
    """
    raise AssertionError(messages.UNREACHABLE.format(value))


def either(on_left: Callable, on_right: Callable) -> Callable:
    """
    Case analysis on a disjoint union.

    Parameters:
        on_left : Applied to the value of a :class:`Left`.
        on_right : Applied to the value of a :class:`Right`.

    Example
    -------
    >>> show = either(lambda n: n + 1, len)
    >>> show(Left(41)), show(Right("xyz"))
    (42, 3)
    """
    def inside(value):
        if isinstance(value, Left):
            return on_left(value.value)
        assert_isinstance(value, Right)
        return on_right(value.value)
    return inside


class Category(symmetric.Category):
    """
    The symmetric monoidal category of Python functions with disjoint union
    as tensor and :class:`Void` as unit.

    .. admonition:: Summary

        .. autosummary::

            tensor
            bimap
            right_unitor
            left_unitor
            associator
            braid
    """
    ob, ar = type, Function

    @property
    def unit(self) -> Any:
        return Void

    def tensor(self, left: Any, right: Any) -> Any:
        return Either[left, right]

    def bimap(self, f: Function, g: Function) -> Function:
        return self.ar(
            either(lambda a: Left(f(a)), lambda b: Right(g(b))),
            Either[f.dom, g.dom], Either[f.cod, g.cod])

    def right_unitor(self, x: Any) -> Function:
        return self.ar(either(lambda a: a, absurd), Either[x, Void], x)

    def right_unitor_inv(self, x: Any) -> Function:
        return self.ar(Left, x, Either[x, Void])

    def left_unitor(self, x: Any) -> Function:
        return self.ar(either(absurd, lambda a: a), Either[Void, x], x)

    def left_unitor_inv(self, x: Any) -> Function:
        return self.ar(Right, x, Either[Void, x])

    def associator(self, x: Any, y: Any, z: Any) -> Function:
        return self.ar(
            either(
                either(Left, lambda b: Right(Left(b))),
                lambda c: Right(Right(c))),
            Either[Either[x, y], z], Either[x, Either[y, z]])

    def associator_inv(self, x: Any, y: Any, z: Any) -> Function:
        return self.ar(
            either(
                lambda a: Left(Left(a)),
                either(lambda b: Left(Right(b)), Right)),
            Either[x, Either[y, z]], Either[Either[x, y], z])

    def braid(self, x: Any, y: Any) -> Function:
        return self.ar(either(Right, Left), Either[x, y], Either[y, x])
