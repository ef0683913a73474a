# -*- coding: utf-8 -*-

"""
coherence error messages.
"""

TYPE_ERROR = "Expected {}, got {} instead."
NOT_COMPOSABLE = "{} does not compose with {}: {} != {}."
NOT_PARALLEL = "Expected parallel arrows, got {} and {} instead."
EMPTY_EQUATION = "An equation needs at least one term."
WRONG_VERTEX = "Vertex {!r} has type {}, got {} instead."
UNKNOWN_VERTEX = "Unknown vertex {!r}."
EMPTY_DIAGRAM = "Empty diagram has no source."
UNINHABITED = "{} is uninhabited."
UNREACHABLE = "Unreachable: {!r} should be uninhabited."
NO_EXAMPLES = "No examples of {}, provide samples explicitly."
NOT_A_LAW = "{!r} is not a law of {}."
