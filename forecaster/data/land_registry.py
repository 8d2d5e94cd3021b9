"""HM Land Registry Price Paid Data lookup.

Recent sold prices for a postcode plus median/average statistics. Free,
no API key required. Falls back to synthetic comparables around a hint
price when the service is unavailable or has no sales for the postcode.
"""

import json
import logging
from datetime import date
from decimal import Decimal

from forecaster.data.base import FETCH_ERRORS, fetch_json, format_postcode, seeded_random
from forecaster.models.signals import PricePaidSummary, Transaction

logger = logging.getLogger(__name__)

PRICE_PAID_URL = "https://land-property.data.gov.uk/land-property/ppd/search"

DEFAULT_HINT_PRICE = 275000
FALLBACK_MONTHS = 24


def _months_ago(today: date, months: int) -> date:
    total = today.year * 12 + (today.month - 1) - months
    return date(total // 12, total % 12 + 1, min(today.day, 28))


def _summarise(transactions: list[Transaction], hint_price: int, fallback: bool) -> PricePaidSummary:
    prices = sorted(t.price for t in transactions)
    median = prices[len(prices) // 2] if prices else hint_price
    average = sum(prices) / len(prices) if prices else hint_price
    return PricePaidSummary(
        transactions=transactions,
        median_price=round(median or hint_price),
        average_price=round(average or hint_price),
        count=len(transactions),
        fallback=fallback,
    )


def fallback_transactions(
    postcode: str, hint_price: int = DEFAULT_HINT_PRICE, today: date | None = None
) -> PricePaidSummary:
    """One synthetic sale per month for two years, priced 80-140% of the hint."""
    rng = seeded_random(postcode)
    today = today or date.today()
    transactions: list[Transaction] = []
    for index in range(FALLBACK_MONTHS):
        price = round(hint_price * (0.8 + rng.random() * 0.6))
        if rng.random() > 0.6:
            property_type = "Detached"
        elif rng.random() > 0.4:
            property_type = "Semi-detached"
        else:
            property_type = "Terraced"
        tenure = "Freehold" if rng.random() > 0.5 else "Leasehold"
        transactions.append(Transaction(
            price=price,
            date=_months_ago(today, index).isoformat(),
            property_type=property_type,
            tenure=tenure,
        ))
    return _summarise(transactions, hint_price, fallback=True)


async def get_price_paid(postcode: str, hint_price: Decimal | None = None) -> PricePaidSummary:
    """Fetch up to 100 recent transactions for a postcode."""
    hint = int(hint_price) if hint_price else DEFAULT_HINT_PRICE
    formatted = format_postcode(postcode)
    if not formatted:
        return fallback_transactions(postcode, hint)

    params = {"size": "100", "search": json.dumps({"postcode": formatted})}
    try:
        payload = await fetch_json(PRICE_PAID_URL, params=params)
        hits = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(hits, list) or not hits:
            logger.info("Land Registry returned no sales for %s, using fallback", formatted)
            return fallback_transactions(postcode, hint)

        transactions = [
            Transaction(
                price=int(float(hit.get("pricePaid") or hit.get("price_paid") or 0)),
                date=hit.get("transferDate") or hit.get("transfer_date") or hit.get("date"),
                property_type=hit.get("propertyType") or hit.get("property_type") or "Unknown",
                tenure=hit.get("tenure") or "Unknown",
            )
            for hit in hits
        ]
    except FETCH_ERRORS as e:
        logger.warning("Land Registry request failed, using fallback data: %s", e)
        return fallback_transactions(postcode, hint)

    return _summarise(transactions, hint, fallback=False)
