# -*- coding: utf-8 -*-

"""
The category of Python functions with sequential composition.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Function

Example
-------
>>> f = Function(len, str, int)
>>> g = Function(lambda n: n % 2 == 0, int, bool)
>>> assert (f >> g)("xy") and (g << f)("xy")
>>> from pytest import raises
>>> with raises(TypeError):
...     f(42)
>>> with Function.no_type_checking:
...     assert (f >> g)([1, 2])
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from contextlib import contextmanager
from typing import Any

from coherence import config
from coherence.utils import (
    Composable, assert_iscomposable, assert_isinstance, assert_hastype,
    classproperty, unbiased)


@dataclass
class Function(Composable[type]):
    """
    Python function with sequential composition.

    Parameters:
        inside : The callable Python object inside the function.
        dom : The domain of the function, i.e. its input type.
        cod : The codomain of the function, i.e. its output type.

    Note
    ----
    Two functions are equal only if they have the same callable inside.
    Extensional equality is checked on samples, see
    :class:`coherence.diagram.Equation`.

    .. admonition:: Summary

        .. autosummary::

            id
            then
    """
    inside: Callable
    dom: Any
    cod: Any

    type_checking = config.TYPE_CHECKING

    def __init__(self, inside: Callable, dom: Any, cod: Any):
        self.inside, self.dom, self.cod = inside, dom, cod

    @classmethod
    def id(cls, dom: Any) -> Function:
        """
        The identity function on a given type :code:`dom`.

        Parameters:
            dom : The type on which to take the identity.
        """
        return cls(lambda x: x, dom, dom)

    @unbiased
    def then(self, other: Function) -> Function:
        """
        The sequential composition of two functions, called with :code:`>>`.

        Parameters:
            other : The other function to compose in sequence.

        Raises:
            AxiomError : If the codomain of ``self`` is not the domain of
                         ``other``.
        """
        assert_isinstance(other, Function)
        assert_iscomposable(self, other)
        return type(self)(lambda x: other(self(x)), self.dom, other.cod)

    @classproperty
    @contextmanager
    def no_type_checking(cls):
        """
        Context manager switching off type checking for every function.

        Note
        ----
        This sets a class attribute, so it applies to the whole process,
        including other threads, until the context exits.
        """
        tmp, cls.type_checking = cls.type_checking, False
        try:
            yield
        finally:
            cls.type_checking = tmp

    def __call__(self, arg):
        if self.type_checking:
            assert_hastype(arg, self.dom)
        result = self.inside(arg)
        if self.type_checking:
            assert_hastype(result, self.cod)
        return result
