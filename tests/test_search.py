from card_offers.core.categories import DEFAULT_OFFERS_FILE, offers_path_for
from card_offers.core.search import filter_cards, find_card

from conftest import CATALOG


def names(cards):
    return [c["Credit Card Name"] for c in cards]


def test_empty_query_matches_nothing():
    assert filter_cards(CATALOG, "") == []


def test_whitespace_only_query_matches_every_named_card():
    assert names(filter_cards(CATALOG, "   ")) == [
        "HDFC Regalia Gold Credit Card",
        "SBI Prime Credit Card",
        "Infinite Rewards Card",
        "Gold Visa Classic",
        "IDFC First Classic Credit Card",
    ]


def test_every_term_must_be_a_substring():
    assert names(filter_cards(CATALOG, "gold")) == [
        "HDFC Regalia Gold Credit Card",
        "Gold Visa Classic",
    ]
    assert names(filter_cards(CATALOG, "gold classic")) == ["Gold Visa Classic"]
    # substring, not word-boundary matching
    assert names(filter_cards(CATALOG, "egal")) == ["HDFC Regalia Gold Credit Card"]


def test_term_order_and_case_do_not_matter():
    a = filter_cards(CATALOG, "gold visa")
    b = filter_cards(CATALOG, "VISA Gold")
    assert a == b
    assert names(a) == ["Gold Visa Classic"]


def test_catalog_order_preserved_and_nameless_rows_skipped():
    result = filter_cards(CATALOG, "card")
    assert names(result) == [
        "HDFC Regalia Gold Credit Card",
        "SBI Prime Credit Card",
        "Infinite Rewards Card",
        "IDFC First Classic Credit Card",
    ]
    assert all(c["Credit Card Name"] for c in filter_cards(CATALOG, "a"))


def test_no_match():
    assert filter_cards(CATALOG, "zzz") == []


def test_find_card_is_exact():
    assert find_card(CATALOG, "SBI Prime Credit Card")["Visa type"] == "Visa Platinum"
    assert find_card(CATALOG, "sbi prime credit card") is None
    assert find_card(CATALOG, "Nope") is None


def test_category_to_offers_file():
    assert offers_path_for("Visa Gold") == "/Visa Gold.csv"
    assert offers_path_for("Visa Platinum") == "/Visa Platinum.csv"
    assert offers_path_for("Visa Signature") == "/Visa Signature.csv"
    assert offers_path_for("Visa Infinite") == "/Visa Infinite.csv"
    assert offers_path_for("visa gold") == DEFAULT_OFFERS_FILE
    assert offers_path_for("") == DEFAULT_OFFERS_FILE
    assert offers_path_for(None) == DEFAULT_OFFERS_FILE
    assert DEFAULT_OFFERS_FILE == "/Visa Standard.csv"
