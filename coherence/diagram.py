# -*- coding: utf-8 -*-

"""
Equations and commutative diagrams of functions, checked on samples.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Equation
    Diagram

Example
-------
>>> from coherence.python.function import Function
>>> f = Function(lambda n: n + 1, int, int)
>>> g = Function(lambda n: n * n, int, int)
>>> square = Diagram("square", [
...     ("a", "b", f), ("b", "d", g), ("a", "c", g), ("c", "d", f)])
>>> assert not square.commutes(1)
>>> assert square.commutes(0)
>>> assert Equation(f >> g, g >> f)(0) and not Equation(f >> g, g >> f)(1)
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

import networkx as nx

from coherence import messages
from coherence.utils import AxiomError, Composable, assert_isparallel, type_name


class Equation:
    """
    An equation is a tuple of parallel arrows, it holds on a sample whenever
    all its terms are equal on it.

    Parameters:
        terms : The parallel arrows.

    Raises:
        AxiomError : If the terms are not parallel.

    Note
    ----
    Equality of results is structural, i.e. Python's :code:`==`.
    """
    def __init__(self, *terms: Composable):
        if not terms:
            raise ValueError(messages.EMPTY_EQUATION)
        for term in terms[1:]:
            assert_isparallel(terms[0], term)
        self.terms = terms

    def __call__(self, sample: Any) -> bool:
        first, *rest = (term(sample) for term in self.terms)
        return all(first == result for result in rest)

    def __repr__(self):
        return f"Equation({', '.join(map(repr, self.terms))})"

    def __str__(self):
        return " == ".join(map(str, self.terms))


class Diagram:
    """
    A diagram is a directed multigraph with objects on the vertices and arrows
    on the edges. It commutes on a sample of its source when any two parallel
    paths starting from the source are equal on the sample.

    Parameters:
        name : The name of the diagram.
        edges : Triples ``(source, target, arrow)`` with vertex labels as
                source and target, the first source is the default source.

    Raises:
        AxiomError : If some vertex is given two different objects.
    """
    def __init__(self, name: str = "",
                 edges: Iterable[tuple[str, str, Composable]] = ()):
        self.name, self.graph = name, nx.MultiDiGraph()
        for source, target, arrow in edges:
            self.add_edge(source, target, arrow)

    def __repr__(self):
        return f"Diagram({self.name!r}, vertices={list(self.graph)})"

    @property
    def source(self) -> str:
        """ The first vertex of the diagram. """
        if not self.graph:
            raise ValueError(messages.EMPTY_DIAGRAM)
        return next(iter(self.graph))

    def ob(self, vertex: str):
        """ The object on a given vertex. """
        if vertex not in self.graph:
            raise KeyError(messages.UNKNOWN_VERTEX.format(vertex))
        return self.graph.nodes[vertex]["ob"]

    def add_vertex(self, vertex: str, ob: Any) -> None:
        """
        Add a vertex with a given object, or check the object it already has.

        Parameters:
            vertex : The label of the vertex.
            ob : The object on the vertex.
        """
        if vertex in self.graph and self.ob(vertex) != ob:
            raise AxiomError(messages.WRONG_VERTEX.format(
                vertex, type_name(self.ob(vertex)), type_name(ob)))
        self.graph.add_node(vertex, ob=ob)

    def add_edge(self, source: str, target: str, arrow: Composable) -> None:
        """
        Add an edge with a given arrow.

        Parameters:
            source : The label of the source, with object ``arrow.dom``.
            target : The label of the target, with object ``arrow.cod``.
            arrow : The arrow on the edge.
        """
        self.add_vertex(source, arrow.dom)
        self.add_vertex(target, arrow.cod)
        self.graph.add_edge(source, target, arrow=arrow)

    def paths(self, source: str, target: str) -> list[Composable]:
        """
        The composite of each simple path from ``source`` to ``target``.

        Parameters:
            source : The label of the source.
            target : The label of the target.
        """
        for vertex in (source, target):
            self.ob(vertex)
        return [
            self._composite(path) for path
            in nx.all_simple_edge_paths(self.graph, source, target)]

    def _composite(self, path: list[tuple[str, str, int]]) -> Composable:
        first, *rest = (
            self.graph.edges[edge]["arrow"] for edge in path)
        return first.then(*rest)

    def equations(self, source: Optional[str] = None) -> Iterator[Equation]:
        """
        The equations between parallel paths starting from ``source``.

        Parameters:
            source : The label of the source, :attr:`source` by default.
        """
        source = self.source if source is None else source
        for target in self.graph:
            if target == source:
                continue
            paths = self.paths(source, target)
            if len(paths) > 1:
                yield Equation(*paths)

    def commutes(self, sample: Any, source: Optional[str] = None) -> bool:
        """
        Whether every equation starting from ``source`` holds on a sample.

        Parameters:
            sample : A value of the object on ``source``.
            source : The label of the source, :attr:`source` by default.
        """
        return all(equation(sample) for equation in self.equations(source))
