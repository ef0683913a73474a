# -*- coding: utf-8 -*-

"""
Symmetric monoidal categories, i.e. braided categories where the braid is
its own inverse.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Category

Axioms
------
Swapping twice is the identity, for tuples and for disjoint unions.

>>> from coherence.python import multiplicative, additive
>>> assert multiplicative.Category().involution_equations((1, "x"), int, str)
>>> assert additive.Category().involution_equations(
...     additive.Left(1), int, str)
"""

from __future__ import annotations

from coherence import braided
from coherence.diagram import Equation
from coherence.laws import law


class Category(braided.Category):
    """
    A symmetric category is a braided category with :meth:`swap` as braid.

    Parameters:
        ob : The objects of the category.
        ar : The arrows of the category.
    """
    def swap(self, x, y):
        """
        The isomorphism from :code:`x @ y` to :code:`y @ x`, which is its own
        inverse.

        Parameters:
            x : The object on the top left and bottom right.
            y : The object on the top right and bottom left.
        """
        return self.braid(x, y)

    @law(lambda self, x, y: self.tensor(x, y))
    def involution_equations(self, fa, x, y) -> bool:
        """
        Swapping twice is the identity.

        Parameters:
            fa : A sample of :code:`x @ y`.
            x : The object on the left.
            y : The object on the right.
        """
        return Equation(
            self.swap(x, y) >> self.swap(y, x),
            self.id(self.tensor(x, y)))(fa)
