# -*- coding: utf-8 -*-

""" Coherence utility functions. """

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from functools import wraps
from typing import (
    Any,
    Generic,
    Iterator,
    Optional,
    TypeVar,
    get_args,
    get_origin,
)

from coherence import config, messages

T = TypeVar('T')


def factory_name(cls: type) -> str:
    """
    Returns a string describing a coherence class.

    Example
    -------
    >>> from coherence.python.additive import Left
    >>> assert factory_name(Left) == "python.additive.Left"
    >>> assert factory_name(int) == "int"
    """
    module = cls.__module__.removeprefix('coherence.')
    return f"{module}.{cls.__name__}".removeprefix('builtins.')


def type_name(typ: Any) -> str:
    """
    Returns a string describing a type or a type expression.

    Example
    -------
    >>> type_name(tuple[int, str])
    'tuple[int, str]'
    >>> type_name(bool)
    'bool'
    """
    return factory_name(typ)\
        if isinstance(typ, type) and get_origin(typ) is None else repr(typ)


def type_args(typ: Any) -> tuple:
    """
    The arguments of a type expression, with :code:`tuple[()]` normalised
    to the empty tuple on every version of Python.

    Example
    -------
    >>> assert type_args(tuple[int, str]) == (int, str)
    >>> assert type_args(tuple[()]) == () == type_args(int)
    """
    args = get_args(typ)
    return () if args == ((), ) else args


def has_type(value: Any, typ: Any) -> bool:
    """
    Whether a value has a given type, where :code:`typ` can be a class,
    a tuple type such as :code:`tuple[int, str]` or any generic alias whose
    origin implements :code:`has_type`, e.g. :class:`python.additive.Either`.

    Parameters:
        value : The value to check.
        typ : The type to check against.

    Example
    -------
    >>> assert has_type((1, ("x", True)), tuple[int, tuple[str, bool]])
    >>> assert has_type((), tuple[()]) and not has_type((1, ), tuple[()])
    >>> assert not has_type((1, 2), tuple[int, str])
    """
    if typ is Any:
        return True
    origin, args = get_origin(typ) or typ, type_args(typ)
    if origin is tuple:
        return isinstance(value, tuple) and len(value) == len(args)\
            and all(map(has_type, value, args))
    if hasattr(origin, "has_type"):
        return origin.has_type(value, *args)
    return isinstance(value, origin)


def examples(typ: Any) -> Iterator[Any]:
    """
    Enumerate the examples of a type, built from :attr:`config.EXAMPLES`.

    Parameters:
        typ : The type of which to enumerate examples.

    Raises:
        TypeError : If some base type has no examples.

    Example
    -------
    >>> list(examples(tuple[bool, tuple[()]]))
    [(False, ()), (True, ())]
    """
    origin, args = get_origin(typ) or typ, type_args(typ)
    if origin is tuple:
        return itertools.product(*map(examples, args))
    if hasattr(origin, "examples"):
        return origin.examples(*args)
    if origin in config.EXAMPLES:
        return iter(config.EXAMPLES[origin])
    raise TypeError(messages.NO_EXAMPLES.format(type_name(typ)))


def assert_isinstance(object_, cls: type | tuple[type, ...]):
    """ Raise ``TypeError`` if ``object`` is not instance of ``cls``. """
    classes = cls if isinstance(cls, tuple) else (cls, )
    cls_name = ' | '.join(map(factory_name, classes))
    if not any(isinstance(object_, cls) for cls in classes):
        raise TypeError(messages.TYPE_ERROR.format(
            cls_name, factory_name(type(object_))))


def assert_hastype(value: Any, typ: Any):
    """ Raise ``TypeError`` if ``value`` does not have type ``typ``. """
    if not has_type(value, typ):
        raise TypeError(messages.TYPE_ERROR.format(
            type_name(typ), repr(value)))


def unbiased(binary_method):
    """
    Turn a biased method with signature (self, other) to an unbiased one, i.e.
    with signature (self, *others), see the `nLab`_.

    .. _nLab: https://ncatlab.org/nlab/show/biased+definition
    """
    @wraps(binary_method)
    def method(self, *others):
        result = self
        for other in others:
            result = binary_method(result, other)
        return result
    return method


class Composable(ABC, Generic[T]):
    """
    Abstract class implementing the syntactic sugar :code:`>>` and :code:`<<`
    for forward and backward composition with some method :code:`then`.

    Example
    -------
    >>> class List(list, Composable):
    ...     def then(self, other):
    ...         return self + other
    >>> assert List([1, 2]) >> List([3]) == List([1, 2, 3])
    >>> assert List([3]) << List([1, 2]) == List([1, 2, 3])
    """
    dom: T
    cod: T

    @abstractmethod
    def then(self, other: Optional[Composable[T]], *others: Composable[T]
             ) -> Composable[T]:
        """
        Sequential composition, to be instantiated.

        Parameters:
            other : The other composable object to compose sequentially.
        """

    def is_composable(self, other: Composable) -> bool:
        """
        Whether two objects are composable, i.e. the codomain of the first is
        the domain of the second.

        Parameters:
            other : The other composable object.
        """
        return self.cod == other.dom

    def is_parallel(self, other: Composable) -> bool:
        """
        Whether two composable objects are parallel, i.e. they have the same
        domain and codomain.

        Parameters:
            other : The other composable object.
        """
        return (self.dom, self.cod) == (other.dom, other.cod)

    __rshift__ = lambda self, other: self.then(other)
    __lshift__ = lambda self, other: other.then(self)


class AxiomError(Exception):
    """ The gods of category theory are not happy. """


def assert_iscomposable(left: Composable, right: Composable):
    """
    Raise :class:`AxiomError` if two objects are not composable,
    i.e. the domain of ``other`` is not the codomain of ``self``.

    Parameters:
        left : A composable object.
        right : Another composable object.
    """
    if not left.is_composable(right):
        raise AxiomError(messages.NOT_COMPOSABLE.format(
            left, right, type_name(left.cod), type_name(right.dom)))


def assert_isparallel(left: Composable, right: Composable):
    """
    Raise :class:`AxiomError` if two composable objects do not have the
    same domain and codomain.

    Parameters:
        left : A composable object.
        right : Another composable object.
    """
    if not left.is_parallel(right):
        raise AxiomError(messages.NOT_PARALLEL.format(left, right))


class classproperty(object):
    """ Adapted from https://stackoverflow.com/a/5192374/18783670 """
    def __init__(self, f):
        self.f = f

    def __get__(self, _, x):
        return self.f(x)
