from typing import Annotated, List

import pytest

from typed_args import option
from typed_args.anno import OptionTag, get_option_tags


def test_option_tag():
    tag = option("p")
    assert tag.name == "p"
    assert not tag.has_default()

    tag = option("p", default=0)
    assert tag.has_default()
    assert tag.default == 0


def test_option_tag_default_none():
    assert option("p", default=None).has_default()


def test_empty_option_name():
    with pytest.raises(ValueError):
        option("")


def test_get_option_tags():
    class T:
        logging: Annotated[bool, option("l")]
        port: int
        names: Annotated[List[str], "doc", option("n")]

    hints, tags = get_option_tags(T)
    assert list(hints.keys()) == ["logging", "port", "names"]
    assert hints["logging"] is bool
    assert hints["port"] is int
    assert hints["names"] == List[str]
    assert tags == {"logging": OptionTag("l"), "names": OptionTag("n")}


def test_duplicated_option_names(capsys):
    class T:
        port: Annotated[int, option("p"), option("q")]

    _, tags = get_option_tags(T)
    assert tags["port"].name == "p"
    assert "[warn]" in capsys.readouterr().err


@pytest.mark.parametrize("name", ["port", "1", "l2", "-"])
def test_option_name_must_form_a_marker(name: str):
    with pytest.raises(ValueError):
        option(name)


def test_long_option_name_is_not_read_as_a_value():
    with pytest.raises(ValueError):

        class T:
            g: Annotated[List[str], option("g")]
            port: Annotated[int, option("port")]
