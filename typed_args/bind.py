from typing import (
    Any,
    Callable,
    Dict,
    Sequence,
    Type,
)

from .anno import OptionTag, get_option_tags
from .parser import (
    OptionParser,
    _preset_parser_int,
    _preset_parser_int_list,
    _preset_parser_str,
    _preset_parser_str_list,
    bool_option_parser,
    list_option_parser,
    unary_option_parser,
)
from .types import (
    BinderMissingTag,
    BinderUnsupportedDataType,
    BinderUnsupportedOptionType,
    OptionParserError,
)
from .typing import BasedType, OptionShape, get_based, get_option_shape


ParserFactory = Callable[[OptionTag], OptionParser[Any]]


def _default(tag: OptionTag, zero: Any) -> Any:
    return tag.default if tag.has_default() else zero


DISPATCH: Dict[OptionShape, ParserFactory] = {
    OptionShape.BOOL: lambda tag: bool_option_parser(_default(tag, False)),
    OptionShape.INT: lambda tag: unary_option_parser(
        _default(tag, 0), _preset_parser_int
    ),
    OptionShape.STR: lambda tag: unary_option_parser(
        _default(tag, ""), _preset_parser_str
    ),
    OptionShape.STR_LIST: lambda tag: list_option_parser(
        _default(tag, []), _preset_parser_str_list
    ),
    OptionShape.INT_LIST: lambda tag: list_option_parser(
        _default(tag, []), _preset_parser_int_list
    ),
}


def resolve_parser(key: str, t: Type, tag: OptionTag) -> OptionParser[Any]:
    factory = DISPATCH.get(get_option_shape(t))
    if factory is None:
        raise BinderUnsupportedOptionType(key, t)
    return factory(tag)


def parse(target: Any, *tokens: str) -> None:
    """
    Bind `tokens` to the annotated fields of `target` in place.

    Fields are processed in declaration order and the first error is raised
    as is; fields assigned before it keep their new values.

    Examples
    ----------
    >>> class Opts:
    ...     logging: Annotated[bool, option("l")]
    ...     port: Annotated[int, option("p")]
    >>> opts = Opts()
    >>> parse(opts, "-l", "-p", "9090")
    >>> opts.logging, opts.port
    (True, 9090)
    """
    if get_based(target) is not BasedType.OBJECT:
        raise BinderUnsupportedDataType(target)

    argv: Sequence[str] = tuple(tokens)
    hints, tags = get_option_tags(type(target))
    for key, t in hints.items():
        tag = tags.get(key)
        if tag is None:
            raise BinderMissingTag(key)
        option_parser = resolve_parser(key, t, tag)
        try:
            val = option_parser.parse(argv, tag.name)
        except OptionParserError as err:
            err.field = key
            raise
        try:
            setattr(target, key, val)
        except AttributeError as err:
            # __slots__ without the field, read-only properties
            raise BinderUnsupportedDataType(target) from err
