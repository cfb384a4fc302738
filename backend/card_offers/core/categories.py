from __future__ import annotations

from typing import Dict, Optional

# Category label ("Visa type" column) -> offers table.
# Exact, case-sensitive match; anything else is treated as the Standard tier.
OFFER_FILES: Dict[str, str] = {
    "Visa Gold": "/Visa Gold.csv",
    "Visa Platinum": "/Visa Platinum.csv",
    "Visa Signature": "/Visa Signature.csv",
    "Visa Infinite": "/Visa Infinite.csv",
}

DEFAULT_CATEGORY = "Visa Standard"
DEFAULT_OFFERS_FILE = "/Visa Standard.csv"


def offers_path_for(visa_type: Optional[str]) -> str:
    """
    Resolve which offers table to load for a card category.
      - "Visa Platinum" => "/Visa Platinum.csv"
      - "visa platinum", "", None, "Mastercard" => "/Visa Standard.csv"
    """
    if not visa_type:
        return DEFAULT_OFFERS_FILE
    return OFFER_FILES.get(visa_type, DEFAULT_OFFERS_FILE)


def is_known_category(visa_type: Optional[str]) -> bool:
    return bool(visa_type) and visa_type in OFFER_FILES
