# -*- coding: utf-8 -*-

""" Coherence configuration. """

# Maximum number of samples per law in :func:`coherence.laws.check`.
NUMBER_OF_SAMPLES = 1000

# Whether functions check the types of their inputs and outputs by default.
TYPE_CHECKING = True

# Mapping from base types to the examples used to enumerate tensor types.
EXAMPLES = {
    bool: (False, True),
    int: (0, 1, -1, 42),
    float: (0., -1.5, 2.25),
    str: ("", "x", "xyz"),
    bytes: (b"", b"\x00"),
}
