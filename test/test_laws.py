# -*- coding: utf-8 -*-

"""
Laws are checked on samples: a counterexample disproves a law, but a law
holding on every sample checked is not proven.
"""

import logging

from pytest import raises

from coherence.laws import *
from coherence.utils import examples
from coherence.python import multiplicative, additive, Function


class BrokenAssociator(multiplicative.Category):
    def associator_inv(self, x, y, z):
        return self.ar(
            lambda triple: ((triple[1][0], triple[0]), triple[1][1]),
            self.tensor(x, self.tensor(y, z)),
            self.tensor(self.tensor(x, y), z))


class BrokenBraid(multiplicative.Category):
    def braid(self, x, y):
        return self.ar(lambda pair: pair, self.tensor(x, y), self.tensor(y, x))


class BrokenUnitor(multiplicative.Category):
    def right_unitor_inv(self, x):
        return self.ar(
            lambda a: (a + 1 if a == 7 else a, ()),
            x, self.tensor(x, self.unit))


def test_law():
    @law(lambda self, x: x)
    def predicate(self, fa, x):
        return True

    assert islaw(predicate) and predicate.on == "ob"
    assert not islaw(multiplicative.Category.tensor)


def test_check():
    C = multiplicative.Category()
    report = check(C, "pentagon_equations", int, bool, str, int)
    assert report.holds and report.samples == 4 * 2 * 3 * 4
    assert str(report)\
        == "pentagon_equations(int, bool, str, int) holds on 96 samples."


def test_check_with_samples():
    C, succ = additive.Category(), Function(lambda n: n + 1, int, int)
    Left, Right = additive.Left, additive.Right
    report = check(C, "braid_naturality", succ, succ,
                   samples=[Left(1), Right(2)])
    assert report and report.samples == 2


def test_check_limit():
    report = check(multiplicative.Category(), "triangle_equations", int, int,
                   limit=5)
    assert report and report.samples == 5


def test_check_ValueError():
    C = multiplicative.Category()
    with raises(ValueError):
        check(C, "hexagon_equations", int, int, int)
    with raises(ValueError):
        check(C, "tensor", int, int)


def test_check_TypeError():
    with raises(TypeError):
        check(multiplicative.Category(), "involution_equations", object, int)


def test_counterexamples(caplog):
    with caplog.at_level(logging.WARNING, logger="coherence.laws"):
        report = check(BrokenAssociator(), "associator_inverse", int, int, int)
    assert not report and report.samples == 64
    assert len(report.counterexamples) == 4 * 3 * 4
    assert ((0, 1), 0) in report.counterexamples
    assert ((0, 0), 1) not in report.counterexamples
    assert str(report).startswith(
        "associator_inverse(int, int, int) fails on 48 of 64 samples")
    assert len(caplog.records) == 48


def test_verify():
    for C in [multiplicative.Category(), additive.Category()]:
        reports = verify(C, int, bool, limit=50)
        assert len(reports) == 56 and all(reports)
        assert {report.law for report in reports} == {
            'bimap_identity',
            'right_unitor_inverse',
            'left_unitor_inverse',
            'associator_inverse',
            'triangle_equations',
            'pentagon_equations',
            'left_hexagon_equations',
            'right_hexagon_equations',
            'involution_equations'}


def test_verify_failures():
    reports = verify(BrokenAssociator(), int, limit=100)
    failures = {report.law for report in reports if not report}
    assert 'associator_inverse' in failures
    assert 'right_hexagon_equations' in failures
    assert not failures & {
        'triangle_equations', 'pentagon_equations', 'left_hexagon_equations'}


def test_ill_typed_counterexamples(caplog):
    with caplog.at_level(logging.WARNING, logger="coherence.laws"):
        report = check(BrokenBraid(), "involution_equations", int, str)
    assert not report and report.samples == 4 * 3
    assert report.counterexamples == list(examples(tuple[int, str]))
    assert any("Ill-typed" in record.getMessage() for record in caplog.records)
    assert check(BrokenBraid(), "involution_equations", int, int)


def test_verify_ill_typed():
    reports = verify(BrokenBraid(), int, str, limit=10)
    assert len(reports) == 56 and not all(reports)
    involutions = {
        report.params: bool(report) for report in reports
        if report.law == 'involution_equations'}
    assert involutions == {
        (int, int): True, (int, str): False,
        (str, int): False, (str, str): True}
    assert all(report for report in reports
               if report.law in ('triangle_equations', 'pentagon_equations'))


def test_sampling_is_not_proof():
    C = BrokenUnitor()
    assert check(C, "right_unitor_inverse", int)
    report = check(C, "right_unitor_inverse", int, samples=[(7, ())])
    assert not report and report.counterexamples == [(7, ())]
