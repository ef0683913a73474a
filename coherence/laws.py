# -*- coding: utf-8 -*-

"""
Checking laws on samples.

A law is a method of some category, marked with the :func:`law` decorator,
which takes a sample value and some parameters (objects or arrows) and returns
whether two or more derivations agree on the sample.

Note
----
Checking a law on samples can only disprove it, never prove it: a
counterexample shows that an instance is not valid, an empty list of
counterexamples only shows that no sample was a counterexample.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Report

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        law
        check
        verify

Example
-------
>>> from coherence.python.multiplicative import Category
>>> report = check(Category(), "pentagon_equations", int, bool, str, int)
>>> assert report and report.samples == 4 * 2 * 3 * 4
>>> print(report)
pentagon_equations(int, bool, str, int) holds on 96 samples.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from coherence import config, messages
from coherence.utils import examples, type_name

logger = logging.getLogger(__name__)


def law(shape: Callable[..., Any], on: str = "ob") -> Callable:
    """
    Mark a method as a law.

    Parameters:
        shape : Computes the type of the samples from the category and the
                parameters of the law.
        on : Whether the parameters are objects ``"ob"`` or arrows ``"ar"``.
    """
    def decorator(method):
        method.shape, method.on = shape, on
        return method
    return decorator


def islaw(method) -> bool:
    """ Whether a method was marked with :func:`law`. """
    return callable(method) and hasattr(method, "shape")


@dataclass
class Report:
    """
    The result of checking a law on some samples.

    Parameters:
        law : The name of the law.
        params : The objects or arrows the law was checked with.
        samples : The number of samples checked.
        counterexamples : The samples on which the law does not hold.

    Note
    ----
    A report is truthy whenever there are no counterexamples.
    """
    law: str
    params: tuple = ()
    samples: int = 0
    counterexamples: list = field(default_factory=list)

    @property
    def holds(self) -> bool:
        """ Whether no counterexample was found. """
        return not self.counterexamples

    def __bool__(self):
        return self.holds

    def __str__(self):
        params = ", ".join(map(type_name, self.params))
        if self.holds:
            return f"{self.law}({params}) holds on {self.samples} samples."
        return f"{self.law}({params}) fails on "\
            f"{len(self.counterexamples)} of {self.samples} samples, "\
            f"e.g. {self.counterexamples[0]!r}."


def check(category, name: str, *params,
          samples: Optional[Iterable[Any]] = None,
          limit: int = None) -> Report:
    """
    Check a law of a category on samples.

    Parameters:
        category : The category with the law.
        name : The name of the law.
        params : The objects or arrows to check the law with.
        samples : The samples, enumerated with :func:`utils.examples` from
                  the shape of the law by default.
        limit : The maximum number of samples to check,
                :attr:`config.NUMBER_OF_SAMPLES` by default.

    Raises:
        ValueError : If ``name`` is not a law of ``category``.
        TypeError : If the shape of the law has no examples.

    Note
    ----
    A sample on which some arrow gets or returns a value of the wrong type
    is a counterexample.
    """
    predicate = getattr(category, name, None)
    if not islaw(predicate):
        raise ValueError(messages.NOT_A_LAW.format(name, category))
    limit = config.NUMBER_OF_SAMPLES if limit is None else limit
    if samples is None:
        samples = examples(predicate.shape(category, *params))
    report = Report(name, params)
    logger.debug("Checking %s%s on %s.", name, params, category)
    for sample in itertools.islice(samples, limit):
        report.samples += 1
        try:
            holds = predicate(sample, *params)
        except TypeError as error:
            logger.warning(
                "Ill-typed %s%s on %s: %s", name, params, category, error)
            holds = False
        if not holds:
            logger.warning(
                "Counterexample to %s%s on %s: %r", name, params,
                category, sample)
            report.counterexamples.append(sample)
    return report


def verify(category, *obs, limit: int = None) -> list[Report]:
    """
    Check every law of a category with objects as parameters, for each
    choice of parameters among the given objects.

    Parameters:
        category : The category with the laws.
        obs : The objects among which to choose parameters.
        limit : The maximum number of samples for each check.

    Note
    ----
    Laws with arrows as parameters (e.g. naturality) are skipped, use
    :func:`check` with explicit arrows instead.
    """
    reports = []
    for name in category.laws():
        predicate = getattr(category, name)
        if predicate.on != "ob":
            continue
        arity = predicate.__code__.co_argcount - 2
        for params in itertools.product(obs, repeat=arity):
            reports.append(check(category, name, *params, limit=limit))
    failures = [report for report in reports if not report]
    logger.info(
        "Verified %d laws of %s: %d failures.",
        len(reports), category, len(failures))
    return reports
