# -*- coding: utf-8 -*-

"""
Braided monoidal categories, i.e. monoidal categories with a natural
isomorphism :meth:`Category.braid` from :code:`x @ y` to :code:`y @ x`.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Category

Axioms
------
The hexagon equations hold for disjoint union with the swap of tags as
braiding.

>>> from coherence.python.additive import Category, Left, Right
>>> C = Category()
>>> assert C.left_hexagon_equations(Left(Right("x")), int, str, bool)
>>> assert C.right_hexagon_equations(Right(Left("x")), int, str, bool)
"""

from __future__ import annotations

from abc import abstractmethod

from coherence import monoidal
from coherence.diagram import Diagram, Equation
from coherence.laws import law


class Category(monoidal.Category):
    """
    A braided category is a monoidal category with a method :meth:`braid`.

    Parameters:
        ob : The objects of the category.
        ar : The arrows of the category.

    .. admonition:: Summary

        .. autosummary::

            braid
            left_hexagon
            right_hexagon
    """
    @abstractmethod
    def braid(self, x, y):
        """
        The isomorphism from :code:`x @ y` to :code:`y @ x`.

        Parameters:
            x : The object on the top left and bottom right.
            y : The object on the top right and bottom left.
        """

    def left_hexagon(self, x, y, z) -> Diagram:
        """
        The hexagon diagram braiding :code:`x` over :code:`y @ z`,
        from :code:`(x @ y) @ z` to :code:`y @ (z @ x)`.

        Parameters:
            x, y, z : The three objects, from left to right.
        """
        return Diagram("left hexagon", [
            ("(x @ y) @ z", "x @ (y @ z)", self.associator(x, y, z)),
            ("x @ (y @ z)", "(y @ z) @ x", self.braid(x, self.tensor(y, z))),
            ("(y @ z) @ x", "y @ (z @ x)", self.associator(y, z, x)),
            ("(x @ y) @ z", "(y @ x) @ z",
             self.bimap(self.braid(x, y), self.id(z))),
            ("(y @ x) @ z", "y @ (x @ z)", self.associator(y, x, z)),
            ("y @ (x @ z)", "y @ (z @ x)",
             self.bimap(self.id(y), self.braid(x, z)))])

    def right_hexagon(self, x, y, z) -> Diagram:
        """
        The hexagon diagram braiding :code:`x @ y` over :code:`z`,
        from :code:`x @ (y @ z)` to :code:`(z @ x) @ y`.

        Parameters:
            x, y, z : The three objects, from left to right.
        """
        return Diagram("right hexagon", [
            ("x @ (y @ z)", "(x @ y) @ z", self.associator_inv(x, y, z)),
            ("(x @ y) @ z", "z @ (x @ y)", self.braid(self.tensor(x, y), z)),
            ("z @ (x @ y)", "(z @ x) @ y", self.associator_inv(z, x, y)),
            ("x @ (y @ z)", "x @ (z @ y)",
             self.bimap(self.id(x), self.braid(y, z))),
            ("x @ (z @ y)", "(x @ z) @ y", self.associator_inv(x, z, y)),
            ("(x @ z) @ y", "(z @ x) @ y",
             self.bimap(self.braid(x, z), self.id(y)))])

    @law(lambda self, f, g: self.tensor(f.dom, g.dom), on="ar")
    def braid_naturality(self, fa, f, g) -> bool:
        """ Sliding two arrows through the braid. """
        return Equation(
            self.bimap(f, g) >> self.braid(f.cod, g.cod),
            self.braid(f.dom, g.dom) >> self.bimap(g, f))(fa)

    @law(lambda self, x, y, z: self.tensor(self.tensor(x, y), z))
    def left_hexagon_equations(self, fa, x, y, z) -> bool:
        """
        Braiding :code:`x` over :code:`y @ z` in one step or in two.

        Parameters:
            fa : A sample of :code:`(x @ y) @ z`.
            x, y, z : The three objects, from left to right.
        """
        return self.left_hexagon(x, y, z).commutes(fa)

    @law(lambda self, x, y, z: self.tensor(x, self.tensor(y, z)))
    def right_hexagon_equations(self, fa, x, y, z) -> bool:
        """
        Braiding :code:`x @ y` over :code:`z` in one step or in two.

        Parameters:
            fa : A sample of :code:`x @ (y @ z)`.
            x, y, z : The three objects, from left to right.
        """
        return self.right_hexagon(x, y, z).commutes(fa)
