# -*- coding: utf-8 -*-

"""
Categories, i.e. identity and composition of arrows, and their laws.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Category

Axioms
------
The category of Python functions is unital and associative, on samples.

>>> from coherence.python.function import Function
>>> C = Category(type, Function)
>>> f = Function(len, str, int)
>>> g = Function(lambda n: n + 1, int, int)
>>> h = Function(str, int, str)
>>> assert C.left_identity("xyz", f) and C.right_identity("xyz", f)
>>> assert C.associativity("xyz", h, g, f)
>>> assert C.compose(g, f)("xyz") == C.then(f, g)("xyz") == 4
>>> assert C.compose(h, C.compose(g, f))("xyz") == "4"
"""

from __future__ import annotations

from abc import ABC

from coherence.diagram import Equation
from coherence.laws import law, islaw
from coherence.utils import Composable, factory_name


class Category(ABC):
    """
    A category is just a pair of Python types :code:`ob` and :code:`ar` with
    appropriate methods :code:`dom`, :code:`cod`, :code:`id` and :code:`then`.

    Parameters:
        ob : The objects of the category, default is :code:`type`.
        ar : The arrows of the category.

    Note
    ----
    Laws take a sample as first argument, then the arrows they are about.
    They return whether both sides of the law agree on the sample.

    Example
    -------
    >>> from coherence.python.function import Function
    >>> Category(type, Function)
    Category(type, python.function.Function)
    """
    ob, ar = type, None

    def __init__(self, ob: type = None, ar: type = None):
        self.ob, self.ar = (ob or type(self).ob), (ar or type(self).ar)

    def __repr__(self):
        return f"Category({factory_name(self.ob)}, {factory_name(self.ar)})"

    def __eq__(self, other):
        return isinstance(other, Category) and type(self) is type(other)\
            and (self.ob, self.ar) == (other.ob, other.ar)

    def __hash__(self):
        return hash((type(self), self.ob, self.ar))

    @classmethod
    def laws(cls) -> list[str]:
        """
        The names of the laws of a category, from the bottom layer up, e.g.
        the laws of :class:`Category` come before those of its subclasses.

        Example
        -------
        >>> Category.laws()
        ['left_identity', 'right_identity', 'associativity', 'inverse']
        """
        names = []
        for base in reversed(cls.__mro__):
            for name, attr in vars(base).items():
                if islaw(attr) and name not in names:
                    names.append(name)
        return names

    def id(self, dom) -> Composable:
        """
        The identity arrow on a given object.

        Parameters:
            dom : The domain (and codomain) of the identity.
        """
        return self.ar.id(dom)

    def then(self, arrow: Composable, *others: Composable) -> Composable:
        """
        Sequential composition in diagrammatic order, i.e. ``arrow`` first.

        Parameters:
            arrow : The first arrow.
            others : The arrows to compose after it.
        """
        return arrow.then(*others)

    def compose(self, f: Composable, g: Composable) -> Composable:
        """
        Composition in applicative order, i.e. apply ``g`` then ``f``.

        Parameters:
            f : The arrow applied second.
            g : The arrow applied first.

        Raises:
            AxiomError : If ``g.cod != f.dom``.
        """
        return self.then(g, f)

    @law(lambda self, f: f.dom, on="ar")
    def left_identity(self, fa, f) -> bool:
        """ Composing an arrow with the identity on its domain. """
        return Equation(self.compose(f, self.id(f.dom)), f)(fa)

    @law(lambda self, f: f.dom, on="ar")
    def right_identity(self, fa, f) -> bool:
        """ Composing an arrow with the identity on its codomain. """
        return Equation(self.compose(self.id(f.cod), f), f)(fa)

    @law(lambda self, f, g, h: h.dom, on="ar")
    def associativity(self, fa, f, g, h) -> bool:
        """
        Composing ``f``, ``g`` and ``h`` in any bracketing.

        Parameters:
            fa : A sample of ``h.dom``.
            f : The arrow applied last.
            g : The arrow applied second.
            h : The arrow applied first.
        """
        return Equation(
            self.compose(self.compose(f, g), h),
            self.compose(f, self.compose(g, h)))(fa)

    @law(lambda self, f, f_inv: f.dom, on="ar")
    def inverse(self, fa, f, f_inv) -> bool:
        """
        Whether ``f_inv`` is the inverse of ``f``, checked on a sample of
        ``f.dom`` and on its image under ``f``.

        Parameters:
            fa : A sample of ``f.dom``.
            f : Some arrow.
            f_inv : Its candidate inverse.
        """
        return Equation(self.then(f, f_inv), self.id(f.dom))(fa)\
            and Equation(self.then(f_inv, f), self.id(f.cod))(f(fa))
