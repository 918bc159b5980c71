import dataclasses
import inspect
from enum import Enum, auto
from typing import (
    Any,
    Type,
    get_args,
    get_origin,
)


class BasedType(Enum):
    NONE = 0
    BUILTIN = auto()
    FROZEN = auto()
    OBJECT = auto()


class OptionShape(Enum):
    UNSUPPORTED = 0
    BOOL = auto()
    INT = auto()
    STR = auto()
    STR_LIST = auto()
    INT_LIST = auto()


_SCALAR_SHAPES = {
    bool: OptionShape.BOOL,
    int: OptionShape.INT,
    str: OptionShape.STR,
}

_LIST_SHAPES = {
    str: OptionShape.STR_LIST,
    int: OptionShape.INT_LIST,
}


def get_based(x: Any) -> BasedType:
    """
    Classify a bind target.

    Only instances of user-defined, mutable classes are records; classes,
    `None`, builtin values, named tuples and frozen dataclass instances are
    not.
    """
    if x is None or inspect.isclass(x):
        return BasedType.NONE
    return get_based_type(type(x))


def get_based_type(t: Type) -> BasedType:
    if t.__module__ == "builtins":
        return BasedType.BUILTIN
    if issubclass(t, tuple):
        return BasedType.FROZEN
    if dataclasses.is_dataclass(t) and t.__dataclass_params__.frozen:  # type: ignore
        return BasedType.FROZEN
    return BasedType.OBJECT


def get_option_shape(t: Type) -> OptionShape:
    """
    Map a declared field type onto the closed set of option shapes.

    Types are compared by identity, so `bool` never falls through to `int`.

    Examples
    ----------
    >>> get_option_shape(List[int])
    <OptionShape.INT_LIST: 5>
    >>> get_option_shape(List[bool])
    <OptionShape.UNSUPPORTED: 0>
    """
    for scalar, shape in _SCALAR_SHAPES.items():
        if t is scalar:
            return shape
    if get_origin(t) is list:
        args = get_args(t)
        if len(args) == 1:
            for elem, shape in _LIST_SHAPES.items():
                if args[0] is elem:
                    return shape
    return OptionShape.UNSUPPORTED
