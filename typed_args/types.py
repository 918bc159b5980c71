from typing import (
    Any,
    List,
    Optional,
    Sequence,
    Type,
)


class ArgsError(Exception):
    ...


class BinderUnsupportedDataType(ArgsError):
    target: Any

    def __init__(self, target: Any, *args: object) -> None:
        self.target = target
        super().__init__(
            f"expected an instance of a mutable record class, got {type(target).__name__}",
            *args,
        )


class BinderMissingTag(ArgsError):
    field: str

    def __init__(self, field: str, *args: object) -> None:
        self.field = field
        super().__init__(f"field '{field}' has no option name", *args)


class BinderUnsupportedOptionType(ArgsError):
    field: str
    type: Type

    def __init__(self, field: str, t: Type, *args: object) -> None:
        self.field = field
        self.type = t
        super().__init__(
            f"field '{field}' has unsupported option type {t!r}", *args
        )


class OptionParserError(ArgsError):
    option: str
    field: Optional[str]
    """set by the binder once the error is attributed to a field"""

    def __init__(self, option: str, msg: str, *args: object) -> None:
        self.option = option
        self.field = None
        super().__init__(msg, *args)


class OptionParserTooManyArguments(OptionParserError):
    count: int

    def __init__(self, option: str, count: int, *args: object) -> None:
        self.count = count
        super().__init__(
            option,
            f"option '-{option}' got {count} unexpected argument(s)",
            *args,
        )


class OptionParserMissingArgument(OptionParserError):
    def __init__(self, option: str, *args: object) -> None:
        super().__init__(
            option, f"option '-{option}' requires an argument", *args
        )


class OptionParserAtLeastOneArgument(OptionParserError):
    def __init__(self, option: str, *args: object) -> None:
        super().__init__(
            option,
            f"option '-{option}' requires at least one argument",
            *args,
        )


class _OptionParserConvertError(OptionParserError):
    values: List[str]
    cause: Exception

    def __init__(
        self,
        option: str,
        values: Sequence[str],
        cause: Exception,
        msg: str,
        *args: object,
    ) -> None:
        self.values = list(values)
        self.cause = cause
        super().__init__(option, f"{msg}: {cause}", *args)


class OptionParserIllegalValue(_OptionParserConvertError):
    def __init__(
        self, option: str, values: Sequence[str], cause: Exception
    ) -> None:
        super().__init__(
            option,
            values,
            cause,
            f"illegal value {' '.join(values)!r} for option '-{option}'",
        )


class OptionParserIllegalListValues(_OptionParserConvertError):
    def __init__(
        self, option: str, values: Sequence[str], cause: Exception
    ) -> None:
        super().__init__(
            option,
            values,
            cause,
            f"illegal values {' '.join(values)!r} for option '-{option}'",
        )
