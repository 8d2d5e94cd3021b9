"""Shared plumbing for the property-signal adapters.

Adapters fetch over HTTP and, on any transport or parse failure, fall back
to synthetic values drawn from a generator seeded by the location, so the
same location always produces the same fallback.
"""

import csv
import io
import math
import random
from typing import Any

import httpx

from forecaster.config import settings

# Failures an adapter converts into a fallback result
FETCH_ERRORS: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    ValueError,
    KeyError,
    TypeError,
    AttributeError,
    csv.Error,
)


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.http_timeout_seconds,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )


async def fetch_json(url: str, params: dict[str, str] | None = None) -> Any:
    async with _client() as client:
        resp = await client.get(url, params=params, headers={"Accept": "application/json"})
        resp.raise_for_status()
        return resp.json()


async def fetch_text(url: str, params: dict[str, str] | None = None) -> str:
    async with _client() as client:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
        return resp.text


def parse_csv(text: str) -> list[dict[str, str]]:
    """Parse a CSV document with a header row into stripped string dicts."""
    reader = csv.DictReader(io.StringIO(text.strip()))
    return [
        {key.strip(): (value or "").strip() for key, value in row.items() if key is not None}
        for row in reader
    ]


def seeded_random(seed: str) -> random.Random:
    return random.Random(seed or "fallback")


def normalise_postcode(postcode: str | None) -> str:
    """Upper-case with all whitespace removed: 'm14 6lt' -> 'M146LT'."""
    if not postcode:
        return ""
    return "".join(postcode.split()).upper()


def format_postcode(postcode: str | None) -> str:
    """Canonical 'OUTWARD INWARD' form: 'm146lt' -> 'M14 6LT'."""
    normalised = normalise_postcode(postcode)
    if len(normalised) <= 3:
        return normalised
    return f"{normalised[:-3]} {normalised[-3:]}"


def to_float(value: Any, default: float) -> float:
    """Coerce an API value to float, using `default` for blanks and junk."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default
