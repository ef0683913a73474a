# -*- coding: utf-8 -*-

"""
Hypothesis strategies for the samples of laws.

Summary
-------

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        values
        samples

Note
----
This module requires :code:`hypothesis`, e.g. with
:code:`pip install coherence[test]`.

Example
-------
>>> from hypothesis import given
>>> from coherence.python.additive import Category
>>> @given(samples(Category(), "triangle_equations", int, str))
... def test_triangle(fa):
...     assert Category().triangle_equations(fa, int, str)
>>> test_triangle()
"""

from __future__ import annotations

from typing import Any, get_origin

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from coherence import messages
from coherence.python.additive import Either, Left, Right, Void
from coherence.utils import type_args, type_name


def values(typ: Any) -> SearchStrategy:
    """
    The strategy for values of a given type.

    Parameters:
        typ : A Python type, possibly built with :code:`tuple`,
              :class:`Either` and :class:`Void`.

    Raises:
        TypeError : If some :class:`Either` has no type arguments.

    Note
    ----
    Floats exclude ``nan`` since it is not equal to itself.
    """
    origin, args = get_origin(typ) or typ, type_args(typ)
    if origin is tuple:
        return st.tuples(*map(values, args))
    if isinstance(origin, type) and issubclass(origin, Either):
        if len(args) != 2:
            raise TypeError(messages.NO_EXAMPLES.format(type_name(typ)))
        left, right = args
        return st.one_of(
            values(left).map(Left), values(right).map(Right))
    if typ is Void:
        return st.nothing()
    if typ is float:
        return st.floats(allow_nan=False)
    return st.from_type(typ)


def samples(category, name: str, *params) -> SearchStrategy:
    """
    The strategy for the samples of a law.

    Parameters:
        category : The category with the law.
        name : The name of the law.
        params : The parameters of the law.
    """
    return values(getattr(category, name).shape(category, *params))
