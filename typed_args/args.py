from __future__ import annotations
import inspect
import sys
from typing import (
    Any,
    Generic,
    List,
    NoReturn,
    Optional,
    Type,
    TypeVar,
)

from .bind import parse
from .typing import BasedType, get_based_type
from .types import (
    ArgsError,
    BinderMissingTag,
    BinderUnsupportedDataType,
    BinderUnsupportedOptionType,
    OptionParserAtLeastOneArgument,
    OptionParserError,
    OptionParserIllegalListValues,
    OptionParserIllegalValue,
    OptionParserMissingArgument,
    OptionParserTooManyArguments,
)
from .utils import none_or, panic
from .utils.color import BasicColors, fg


T = TypeVar("T")


def colorize_text_t_option_name(name: str) -> str:
    return str(fg(f"-{name}", BasicColors.Yellow))


def colorize_text_t_field(key: str) -> str:
    return str(fg(key, BasicColors.Cyan))


def colorize_text_t_type(t: Any) -> str:
    try:
        tn: str = t.__name__
    except AttributeError:
        tn = str(t)
    return str(fg(tn, BasicColors.Blue))


def colorize_text_t_value(val: Any) -> str:
    return str(fg(val, BasicColors.Red))


def _describe(err: ArgsError) -> str:
    if isinstance(err, BinderMissingTag):
        return f"field {colorize_text_t_field(err.field)} has no option name"
    if isinstance(err, BinderUnsupportedOptionType):
        return f"field {colorize_text_t_field(err.field)} has unsupported type {colorize_text_t_type(err.type)}"
    if isinstance(err, BinderUnsupportedDataType):
        t = err.target if inspect.isclass(err.target) else type(err.target)
        return f"cannot bind options into {colorize_text_t_type(t)}"
    if isinstance(err, OptionParserTooManyArguments):
        return f"the option {colorize_text_t_option_name(err.option)} got {err.count} unexpected argument(s)"
    if isinstance(err, OptionParserMissingArgument):
        return f"the option {colorize_text_t_option_name(err.option)} requires a value, which was not supplied"
    if isinstance(err, OptionParserAtLeastOneArgument):
        return f"the option {colorize_text_t_option_name(err.option)} requires at least one value, which was not supplied"
    if isinstance(err, OptionParserIllegalValue):
        return f"invalid value {colorize_text_t_value(' '.join(err.values))} for option {colorize_text_t_option_name(err.option)}"
    if isinstance(err, OptionParserIllegalListValues):
        return f"invalid values {colorize_text_t_value(' '.join(err.values))} for option {colorize_text_t_option_name(err.option)}"
    return str(err)


class Args(Generic[T]):
    """
    Class-based front end: builds a fresh `argstype` instance per call and
    binds the command line into it.
    """

    _argstype: Type[T]
    _name: Optional[str]
    _raw_err: bool

    def __init__(self, argstype: Type[T]) -> None:
        if not inspect.isclass(argstype):
            raise BinderUnsupportedDataType(argstype)
        if get_based_type(argstype) is not BasedType.OBJECT:
            raise BinderUnsupportedDataType(argstype)
        self._argstype = argstype
        self._name = None
        self._raw_err = False

    def name(self, text: str) -> Args[T]:
        self._name = text
        return self

    def raw_exception(self, tog: bool) -> Args[T]:
        self._raw_err = tog
        return self

    def _panic(self, err: ArgsError, alt_title: str) -> NoReturn:
        if self._raw_err:
            raise err
        title = none_or(self._name, alt_title)
        msg = _describe(err)
        if isinstance(err, OptionParserError) and err.field is not None:
            msg += f" (field {colorize_text_t_field(err.field)})"
        panic(f"{title}: {msg}\n\t{err.__class__.__name__}")

    def _new_args_obj(self) -> T:
        try:
            return self._argstype.__new__(self._argstype)
        except TypeError as err:
            # __new__ requiring arguments
            raise BinderUnsupportedDataType(self._argstype) from err

    def parse(self, argv: Optional[List[str]] = None) -> T:
        if argv is None:
            argv = sys.argv[1:]
        try:
            args_obj = self._new_args_obj()
            parse(args_obj, *argv)
        except ArgsError as err:
            self._panic(err, "Args.parse")
        return args_obj
