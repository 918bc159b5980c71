from .anno import OptionTag, option
from .args import Args
from .bind import parse
from .parser import (
    OptionParser,
    bool_option_parser,
    is_marker,
    list_option_parser,
    unary_option_parser,
)
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
