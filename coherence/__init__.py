# -*- coding: utf-8 -*-

""" coherence: checking the laws of monoidal categories on samples. """

from coherence import (
    cat,
    monoidal,
    braided,
    symmetric,
    python,
    diagram,
    laws,
    utils,
    config,
    messages,
)

__version__ = '0.1.0'
