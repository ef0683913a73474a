# -*- coding: utf-8 -*-

"""
The category of Python functions with tuple as monoidal product.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Category

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        tensor

Example
-------
>>> C = Category()
>>> alpha = C.associator(int, str, bool)
>>> alpha(((1, "x"), True))
(1, ('x', True))
>>> C.associator_inv(int, str, bool)(alpha(((1, "x"), True)))
((1, 'x'), True)
>>> C.right_unitor(int)((42, ())), C.left_unitor_inv(int)(42)
(42, ((), 42))
>>> C.braid(int, str)((1, "x"))
('x', 1)
"""

from __future__ import annotations

from typing import Any

from coherence import symmetric
from coherence.python.function import Function


# The unit of the product, with the empty tuple as only value.
Unit = tuple[()]


def tensor(left: Any, right: Any) -> Any:
    """
    The product of two Python types, i.e. the type of pairs.

    Parameters:
        left : The type on the left.
        right : The type on the right.

    Example
    -------
    >>> tensor(int, tensor(str, bool))
    tuple[int, tuple[str, bool]]
    """
    return tuple[left, right]


class Category(symmetric.Category):
    """
    The symmetric monoidal category of Python functions with pairs as tensor
    and the empty tuple as unit.

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
        return Unit

    def tensor(self, left: Any, right: Any) -> Any:
        return tensor(left, right)

    def bimap(self, f: Function, g: Function) -> Function:
        return self.ar(
            lambda pair: (f(pair[0]), g(pair[1])),
            tensor(f.dom, g.dom), tensor(f.cod, g.cod))

    def right_unitor(self, x: Any) -> Function:
        return self.ar(lambda pair: pair[0], tensor(x, Unit), x)

    def right_unitor_inv(self, x: Any) -> Function:
        return self.ar(lambda a: (a, ()), x, tensor(x, Unit))

    def left_unitor(self, x: Any) -> Function:
        return self.ar(lambda pair: pair[1], tensor(Unit, x), x)

    def left_unitor_inv(self, x: Any) -> Function:
        return self.ar(lambda a: ((), a), x, tensor(Unit, x))

    def associator(self, x: Any, y: Any, z: Any) -> Function:
        return self.ar(
            lambda triple: (triple[0][0], (triple[0][1], triple[1])),
            tensor(tensor(x, y), z), tensor(x, tensor(y, z)))

    def associator_inv(self, x: Any, y: Any, z: Any) -> Function:
        return self.ar(
            lambda triple: ((triple[0], triple[1][0]), triple[1][1]),
            tensor(x, tensor(y, z)), tensor(tensor(x, y), z))

    def braid(self, x: Any, y: Any) -> Function:
        return self.ar(
            lambda pair: (pair[1], pair[0]), tensor(x, y), tensor(y, x))
