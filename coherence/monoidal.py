# -*- coding: utf-8 -*-

"""
Monoidal categories, i.e. categories with a bifunctor as tensor, a unit,
unitors and associator, and their coherence laws.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Bifunctor
    Category

Axioms
------
We can check the triangle and pentagon equations on the category of Python
functions with tuple as tensor.

>>> from coherence.python.multiplicative import Category
>>> C = Category()
>>> assert C.triangle_equations(((1, ()), "x"), int, str)
>>> assert C.pentagon_equations((((1, "x"), True), 2.5), int, str, bool, float)

The coherence laws are commutative diagrams.

>>> C.pentagon(int, str, bool, float)  # doctest: +ELLIPSIS
Diagram('pentagon', vertices=[...])
>>> assert C.pentagon(int, int, int, int).commutes((((1, 2), 3), 4))
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from coherence import cat
from coherence.diagram import Diagram, Equation
from coherence.laws import law


class Bifunctor(ABC):
    """
    A bifunctor maps pairs of objects to objects and pairs of arrows to
    arrows, preserving identity and composition.

    Note
    ----
    This assumes a method :code:`id`, e.g. from :class:`cat.Category`.
    """
    @abstractmethod
    def tensor(self, left, right):
        """
        The tensor of two objects.

        Parameters:
            left : The object on the left.
            right : The object on the right.
        """

    @abstractmethod
    def bimap(self, f, g):
        """
        The tensor of two arrows, i.e. apply ``f`` on the left and ``g`` on
        the right.

        Parameters:
            f : The arrow on the left.
            g : The arrow on the right.
        """

    @law(lambda self, x, y: self.tensor(x, y))
    def bimap_identity(self, fa, x, y) -> bool:
        """ The tensor of identities is the identity of the tensor. """
        return Equation(
            self.bimap(self.id(x), self.id(y)),
            self.id(self.tensor(x, y)))(fa)

    @law(lambda self, f1, g1, f2, g2: self.tensor(f1.dom, g1.dom), on="ar")
    def bimap_composition(self, fa, f1, g1, f2, g2) -> bool:
        """ The interchange law, i.e. tensor preserves composition. """
        return Equation(
            self.bimap(f1, g1) >> self.bimap(f2, g2),
            self.bimap(f1 >> f2, g1 >> g2))(fa)


class Category(Bifunctor, cat.Category):
    """
    A monoidal category is a category with a bifunctor :meth:`tensor`,
    a :attr:`unit` object and natural isomorphisms for unit and associativity.

    Parameters:
        ob : The objects of the category.
        ar : The arrows of the category.

    .. admonition:: Summary

        .. autosummary::

            unit
            right_unitor
            left_unitor
            associator
            triangle
            pentagon
    """
    @property
    @abstractmethod
    def unit(self):
        """ The unit of the tensor. """

    @abstractmethod
    def right_unitor(self, x):
        """ The isomorphism from :code:`x @ unit` to :code:`x`. """

    @abstractmethod
    def right_unitor_inv(self, x):
        """ The isomorphism from :code:`x` to :code:`x @ unit`. """

    @abstractmethod
    def left_unitor(self, x):
        """ The isomorphism from :code:`unit @ x` to :code:`x`. """

    @abstractmethod
    def left_unitor_inv(self, x):
        """ The isomorphism from :code:`x` to :code:`unit @ x`. """

    @abstractmethod
    def associator(self, x, y, z):
        """ The isomorphism from :code:`(x @ y) @ z` to :code:`x @ (y @ z)`. """

    @abstractmethod
    def associator_inv(self, x, y, z):
        """ The isomorphism from :code:`x @ (y @ z)` to :code:`(x @ y) @ z`. """

    def triangle(self, x, y) -> Diagram:
        """
        The triangle diagram, from :code:`(x @ unit) @ y` to :code:`x @ y`.

        Parameters:
            x : The object on the left.
            y : The object on the right.
        """
        return Diagram("triangle", [
            ("(x @ I) @ y", "x @ y",
             self.bimap(self.right_unitor(x), self.id(y))),
            ("(x @ I) @ y", "x @ (I @ y)",
             self.associator(x, self.unit, y)),
            ("x @ (I @ y)", "x @ y",
             self.bimap(self.id(x), self.left_unitor(y)))])

    def pentagon(self, w, x, y, z) -> Diagram:
        """
        The pentagon diagram, from :code:`((w @ x) @ y) @ z`
        to :code:`w @ (x @ (y @ z))`.

        Parameters:
            w, x, y, z : The four objects, from left to right.
        """
        return Diagram("pentagon", [
            ("((w @ x) @ y) @ z", "(w @ x) @ (y @ z)",
             self.associator(self.tensor(w, x), y, z)),
            ("(w @ x) @ (y @ z)", "w @ (x @ (y @ z))",
             self.associator(w, x, self.tensor(y, z))),
            ("((w @ x) @ y) @ z", "(w @ (x @ y)) @ z",
             self.bimap(self.associator(w, x, y), self.id(z))),
            ("(w @ (x @ y)) @ z", "w @ ((x @ y) @ z)",
             self.associator(w, self.tensor(x, y), z)),
            ("w @ ((x @ y) @ z)", "w @ (x @ (y @ z))",
             self.bimap(self.id(w), self.associator(x, y, z)))])

    @law(lambda self, x: self.tensor(x, self.unit))
    def right_unitor_inverse(self, fa, x) -> bool:
        """ The right unitor and its inverse are mutually inverse. """
        return self.inverse(
            fa, self.right_unitor(x), self.right_unitor_inv(x))

    @law(lambda self, x: self.tensor(self.unit, x))
    def left_unitor_inverse(self, fa, x) -> bool:
        """ The left unitor and its inverse are mutually inverse. """
        return self.inverse(
            fa, self.left_unitor(x), self.left_unitor_inv(x))

    @law(lambda self, x, y, z: self.tensor(self.tensor(x, y), z))
    def associator_inverse(self, fa, x, y, z) -> bool:
        """ The associator and its inverse are mutually inverse. """
        return self.inverse(
            fa, self.associator(x, y, z), self.associator_inv(x, y, z))

    @law(lambda self, f: self.tensor(f.dom, self.unit), on="ar")
    def right_unitor_naturality(self, fa, f) -> bool:
        """ Sliding an arrow through the right unitor. """
        return Equation(
            self.bimap(f, self.id(self.unit)) >> self.right_unitor(f.cod),
            self.right_unitor(f.dom) >> f)(fa)

    @law(lambda self, f: self.tensor(self.unit, f.dom), on="ar")
    def left_unitor_naturality(self, fa, f) -> bool:
        """ Sliding an arrow through the left unitor. """
        return Equation(
            self.bimap(self.id(self.unit), f) >> self.left_unitor(f.cod),
            self.left_unitor(f.dom) >> f)(fa)

    @law(lambda self, f, g, h: self.tensor(self.tensor(f.dom, g.dom), h.dom),
         on="ar")
    def associator_naturality(self, fa, f, g, h) -> bool:
        """ Sliding three arrows through the associator. """
        return Equation(
            self.bimap(self.bimap(f, g), h)
            >> self.associator(f.cod, g.cod, h.cod),
            self.associator(f.dom, g.dom, h.dom)
            >> self.bimap(f, self.bimap(g, h)))(fa)

    @law(lambda self, x, y: self.tensor(self.tensor(x, self.unit), y))
    def triangle_equations(self, fa, x, y) -> bool:
        """
        Removing the unit from :code:`(x @ unit) @ y` with the right unitor,
        or with the associator then the left unitor.

        Parameters:
            fa : A sample of :code:`(x @ unit) @ y`.
            x : The object on the left.
            y : The object on the right.
        """
        return self.triangle(x, y).commutes(fa)

    @law(lambda self, w, x, y, z:
         self.tensor(self.tensor(self.tensor(w, x), y), z))
    def pentagon_equations(self, fa, w, x, y, z) -> bool:
        """
        Re-bracketing :code:`((w @ x) @ y) @ z` along either side of the
        pentagon.

        Parameters:
            fa : A sample of :code:`((w @ x) @ y) @ z`.
            w, x, y, z : The four objects, from left to right.
        """
        return self.pentagon(w, x, y, z).commutes(fa)
