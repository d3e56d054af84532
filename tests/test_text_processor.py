import pytest

from core_logic import EmptyInput
from text_processor import add_quotes, convert_format, remove_quotes, replace_fullwidth_commas


def test_convert_format():
    assert convert_format("1,2,3") == "1\n2\n3"
    assert convert_format("1\n2\n3") == "1,2,3"
    assert convert_format(convert_format(" 1, 2 ,3 ")) == "1,2,3"


def test_replace_fullwidth_commas():
    assert replace_fullwidth_commas("1，2，3") == "1,2,3"


def test_add_remove_quotes():
    with_quotes = add_quotes("1,2,3")
    assert with_quotes == "'1','2','3'"
    assert remove_quotes(with_quotes) == "1,2,3"


def test_quotes_keep_newline_delimiter():
    assert add_quotes("1\n'2'\n3") == "'1'\n'2'\n'3'"
    assert remove_quotes("'1'\n2\n'3") == "1\n2\n'3"


@pytest.mark.parametrize("operation", [convert_format, replace_fullwidth_commas, add_quotes, remove_quotes])
def test_empty_input(operation):
    with pytest.raises(EmptyInput):
        operation("")
