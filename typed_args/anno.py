from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    Tuple,
    Type,
    get_args,
    get_origin,
    get_type_hints,
)

from .parser import is_marker
from .utils import warn


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class OptionTag:
    name: str
    default: Any = UNSET
    """used instead of the type's zero value when the option is absent"""

    def has_default(self) -> bool:
        return self.default is not UNSET


def option(name: str, default: Any = UNSET) -> OptionTag:
    """
    Declare the option name feeding a field.

    Examples
    ----------
    >>> class Opts:
    ...     port: Annotated[int, option("p", default=8080)]
    """
    if len(name) == 0:
        raise ValueError("option name must not be empty")
    if not is_marker(f"-{name}"):
        raise ValueError(
            f"option name {name!r} does not form a marker token '-{name}'"
        )
    return OptionTag(name, default)


def get_option_tags(
    t: Type,
) -> Tuple[Dict[str, Type], Dict[str, OptionTag]]:
    """
    Read the declared fields of `t` in declaration order.

    Returns the field types with `Annotated` stripped and, for every field
    that declares one, its `OptionTag`.
    """
    key_dict = get_type_hints(t, include_extras=True)
    hints: Dict[str, Type] = {}
    tags: Dict[str, OptionTag] = {}
    for key, anno in key_dict.items():
        if get_origin(anno) is ClassVar:
            continue
        if get_origin(anno) is not Annotated:
            hints[key] = anno
            continue
        raw_t, *anno_args = get_args(anno)
        hints[key] = raw_t
        found = [a for a in anno_args if isinstance(a, OptionTag)]
        if len(found) == 0:
            continue
        if len(found) > 1:
            warn(
                f"field '{key}' declares {len(found)} option names; using '-{found[0].name}'"
            )
        tags[key] = found[0]
    return hints, tags
