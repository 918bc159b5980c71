import re
from typing import (
    Callable,
    Generic,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
)

from .types import (
    OptionParserAtLeastOneArgument,
    OptionParserIllegalListValues,
    OptionParserIllegalValue,
    OptionParserMissingArgument,
    OptionParserTooManyArguments,
)


_DECIMAL = re.compile(r"[+-]?[0-9]+")

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Converter = Callable[..., T]
"""`(*values: str) -> T`; raises on illegal input"""

ListConverter = Callable[..., List[T]]


class OptionParser(Protocol[T_co]):
    def parse(self, tokens: Sequence[str], name: str) -> T_co:
        ...


def is_marker(token: str) -> bool:
    """
    Examples
    ----------
    >>> is_marker("-d"), is_marker("--list")
    (True, True)
    >>> is_marker("-1"), is_marker("-l2")
    (False, False)
    """
    if token.startswith("--"):
        return True
    return len(token) == 2 and token[0] == "-" and token[1].isalpha()


def _find_values(
    tokens: Sequence[str], name: str
) -> Tuple[bool, List[str]]:
    flag = f"-{name}"
    try:
        idx = list(tokens).index(flag)
    except ValueError:
        return False, []
    values: List[str] = []
    for tk in tokens[idx + 1 :]:
        if is_marker(tk):
            break
        values.append(tk)
    return True, values


class BoolOptionParser:
    default: bool

    def __init__(self, default: bool = False) -> None:
        self.default = default

    def parse(self, tokens: Sequence[str], name: str) -> bool:
        present, values = _find_values(tokens, name)
        if not present:
            return self.default
        if len(values) != 0:
            raise OptionParserTooManyArguments(name, len(values))
        return True


class UnaryOptionParser(Generic[T]):
    default: T
    convert: Converter[T]

    def __init__(self, default: T, convert: Converter[T]) -> None:
        self.default = default
        self.convert = convert

    def parse(self, tokens: Sequence[str], name: str) -> T:
        present, values = _find_values(tokens, name)
        if not present:
            return self.default
        if len(values) == 0:
            raise OptionParserMissingArgument(name)
        if len(values) > 1:
            raise OptionParserTooManyArguments(name, len(values))
        try:
            return self.convert(*values)
        except Exception as err:
            raise OptionParserIllegalValue(name, values, err) from err


class ListOptionParser(Generic[T]):
    default: List[T]
    convert: ListConverter[T]

    def __init__(self, default: List[T], convert: ListConverter[T]) -> None:
        self.default = default
        self.convert = convert

    def parse(self, tokens: Sequence[str], name: str) -> List[T]:
        present, values = _find_values(tokens, name)
        if not present:
            return list(self.default)
        if len(values) == 0:
            raise OptionParserAtLeastOneArgument(name)
        try:
            return self.convert(*values)
        except Exception as err:
            raise OptionParserIllegalListValues(name, values, err) from err


def bool_option_parser(default: bool = False) -> BoolOptionParser:
    return BoolOptionParser(default)


def unary_option_parser(
    default: T, convert: Converter[T]
) -> UnaryOptionParser[T]:
    return UnaryOptionParser(default, convert)


def list_option_parser(
    default: Optional[List[T]], convert: ListConverter[T]
) -> ListOptionParser[T]:
    return ListOptionParser([] if default is None else default, convert)


# preset converters used by the binder's dispatch table


def _preset_parser_str(*values: str) -> str:
    return values[0]


def _atoi(text: str) -> int:
    if _DECIMAL.fullmatch(text) is None:
        raise ValueError(f"invalid decimal integer {text!r}")
    return int(text, 10)


def _preset_parser_int(*values: str) -> int:
    return _atoi(values[0])


def _preset_parser_str_list(*values: str) -> List[str]:
    return list(values)


def _preset_parser_int_list(*values: str) -> List[int]:
    val: List[int] = []
    for e in values:
        val.append(_atoi(e))
    return val
