import pytest

from card_offers.core.errors import ParseFailure
from card_offers.core.tabular import parse_table


def test_rows_keyed_by_header_and_kept_as_strings():
    text = "Credit Card Name,Visa type,Rating\nAlpha Card,Visa Gold,4.5\nBeta Card,,007\n"
    rows = parse_table(text)
    assert rows == [
        {"Credit Card Name": "Alpha Card", "Visa type": "Visa Gold", "Rating": "4.5"},
        {"Credit Card Name": "Beta Card", "Visa type": "", "Rating": "007"},
    ]


def test_blank_lines_and_empty_input():
    assert parse_table("") == []
    assert parse_table("   \n") == []
    assert parse_table("Title,Image,Link\n") == []

    rows = parse_table("Title,Image,Link\n\nA,http://i/a.jpg,http://l/a\n\n")
    assert rows == [{"Title": "A", "Image": "http://i/a.jpg", "Link": "http://l/a"}]


def test_na_like_values_are_not_converted():
    rows = parse_table("Credit Card Name,Rating\nNA,None\n")
    assert rows == [{"Credit Card Name": "NA", "Rating": "None"}]


def test_quoted_commas():
    rows = parse_table('Title,Link\n"Dine, save 20%",http://l/x\n')
    assert rows[0]["Title"] == "Dine, save 20%"


def test_malformed_content_raises_parse_failure():
    with pytest.raises(ParseFailure) as exc:
        parse_table('Title,Link\n"unterminated,http://l/x\n', path="/Visa Gold.csv")
    assert exc.value.path == "/Visa Gold.csv"
