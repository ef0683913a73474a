# -*- coding: utf-8 -*-

"""
Monoidal categories of Python functions.

.. autosummary::
    :template: module.rst
    :nosignatures:
    :toctree: ../_api

    coherence.python.function
    coherence.python.multiplicative
    coherence.python.additive
"""

from coherence.python.function import Function
from coherence.python import multiplicative, additive
