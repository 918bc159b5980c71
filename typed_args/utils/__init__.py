import sys
from typing import (
    NoReturn,
    Optional,
    TypeVar,
)


T = TypeVar("T")


def panic(msg: str, exit_code: int = 1) -> NoReturn:
    sys.stderr.write(msg + "\n")
    sys.exit(exit_code)


def warn(msg: str) -> None:
    sys.stderr.write(f"[warn] {msg}\n")


def none_or(val: Optional[T], alt: T) -> T:
    return alt if val is None else val
