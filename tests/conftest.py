"""Pytest fixtures: in-memory tables standing in for the static CSV files."""

import asyncio

import pytest

from card_offers.core.catalog import CatalogLoader
from card_offers.core.errors import RetrievalFailure

CATALOG = [
    {"Credit Card Name": "HDFC Regalia Gold Credit Card", "Visa type": "Visa Gold", "Rating": "4.5"},
    {"Credit Card Name": "SBI Prime Credit Card", "Visa type": "Visa Platinum", "Rating": "4.2"},
    {"Credit Card Name": "Infinite Rewards Card", "Visa type": "Visa Infinite", "Rating": ""},
    {"Credit Card Name": "Gold Visa Classic", "Visa type": "Visa Gold", "Rating": "3.9"},
    {"Credit Card Name": "IDFC First Classic Credit Card", "Visa type": "", "Rating": "3.8"},
    {"Credit Card Name": "", "Visa type": "Visa Gold", "Rating": ""},
]


def offers_table(tier: str, n: int = 2):
    return [
        {
            "Title": f"{tier} offer {i}",
            "Image": f"https://img.example/{tier}/{i}.jpg",
            "Link": f"https://offers.example/{tier}/{i}",
        }
        for i in range(1, n + 1)
    ]


class FakeTables:
    """
    Async stand-in for load_table.
    `tables` maps resource path -> rows (or an exception to raise).
    `delays` maps resource path -> seconds to sleep before answering.
    """

    def __init__(self, tables, delays=None):
        self.tables = tables
        self.delays = delays or {}
        self.calls = []

    async def __call__(self, path):
        self.calls.append(path)
        delay = self.delays.get(path)
        if delay:
            await asyncio.sleep(delay)
        if path not in self.tables:
            raise RetrievalFailure(path, "not found")
        value = self.tables[path]
        if isinstance(value, Exception):
            raise value
        return list(value)


@pytest.fixture
def tables():
    return FakeTables(
        {
            "/Credit-Card-Products.csv": CATALOG,
            "/Visa Gold.csv": offers_table("gold"),
            "/Visa Platinum.csv": offers_table("platinum"),
            "/Visa Signature.csv": offers_table("signature"),
            "/Visa Infinite.csv": offers_table("infinite"),
            "/Visa Standard.csv": offers_table("standard", n=1),
        }
    )


@pytest.fixture
def catalog(tables):
    return CatalogLoader(path="/Credit-Card-Products.csv", fetch=tables)
