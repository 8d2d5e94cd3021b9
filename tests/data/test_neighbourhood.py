"""Planning, crime, schools and nuisance adapters."""

from unittest.mock import AsyncMock, patch

import httpx

from forecaster.data.nuisance import get_nuisance_reports
from forecaster.data.planning import get_planning_activity
from forecaster.data.police import get_street_crime
from forecaster.data.schools import get_school_quality

LAT, LON = 53.4509, -2.2196

SCHOOLS_CSV = """School,Postcode,OfstedRating
Alpha Primary,M14 6LT,Outstanding
Beta High,M14 6LT,Good
Gamma Academy,M146LT,Requires improvement
Delta Primary,M14 6LT,Good
Elsewhere School,SW1A 1AA,Outstanding
"""

NUISANCE_CSV = """LocalAuthority,Complaints,Year
Manchester,1843,2022/23
Salford,912,
"""


class TestPlanningActivity:
    async def test_counts_by_stage(self):
        payload = {"items": [
            {"stage": "in-progress"},
            {"stage": "granted"},
            {"stage": "granted"},
            {"stage": "refused"},
            {"stage": "withdrawn"},
        ]}
        with patch("forecaster.data.planning.fetch_json", new_callable=AsyncMock, return_value=payload):
            activity = await get_planning_activity("m146lt", "Manchester")
        assert (activity.pending, activity.approved, activity.refused) == (1, 2, 1)
        assert activity.count == 5
        assert activity.fallback is False

    async def test_query_params(self):
        with patch(
            "forecaster.data.planning.fetch_json", new_callable=AsyncMock, return_value={"items": []}
        ) as mock_fetch:
            await get_planning_activity("m146lt", "Manchester")
        params = mock_fetch.call_args.kwargs["params"]
        assert params["postcode"] == "M14 6LT"
        assert params["local-authority"] == "Manchester"

    async def test_error_falls_back(self, offline):
        activity = await get_planning_activity("M14 6LT")
        assert activity.fallback is True
        assert activity.count == activity.pending + activity.approved + activity.refused
        assert 4 <= activity.approved <= 16


class TestStreetCrime:
    async def test_no_coordinates(self):
        summary = await get_street_crime(None, None)
        assert summary.count == 0
        assert summary.fallback is False

    async def test_top_categories(self):
        crimes = (
            [{"category": "burglary"}] * 3
            + [{"category": "vehicle-crime"}] * 5
            + [{"category": c} for c in ("drugs", "shoplifting", "robbery", "other-theft")]
        )
        with patch("forecaster.data.police.fetch_json", new_callable=AsyncMock, return_value=crimes):
            summary = await get_street_crime(LAT, LON, month="2024-05")
        assert summary.count == 12
        assert len(summary.categories) == 5
        assert summary.categories[0].category == "vehicle-crime"
        assert summary.categories[0].count == 5
        assert summary.categories[1].count == 3

    async def test_month_param(self):
        with patch("forecaster.data.police.fetch_json", new_callable=AsyncMock, return_value=[]) as mock_fetch:
            await get_street_crime(LAT, LON, month="2024-05")
        assert mock_fetch.call_args.kwargs["params"]["date"] == "2024-05"

    async def test_error_falls_back(self):
        with patch(
            "forecaster.data.police.fetch_json",
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("unreachable"),
        ):
            summary = await get_street_crime(LAT, LON)
        assert summary.fallback is True
        assert 20 <= summary.count <= 90
        assert [c.category for c in summary.categories] == [
            "anti-social-behaviour", "violence-and-sexual-offences", "public-order",
        ]


class TestSchoolQuality:
    async def test_rating_shares(self):
        with patch("forecaster.data.schools.fetch_text", new_callable=AsyncMock, return_value=SCHOOLS_CSV):
            quality = await get_school_quality("m14 6lt")
        assert quality.outstanding_share == 0.25
        assert quality.good_share == 0.5
        assert quality.fallback is False

    async def test_no_schools_for_postcode(self):
        with patch("forecaster.data.schools.fetch_text", new_callable=AsyncMock, return_value=SCHOOLS_CSV):
            quality = await get_school_quality("LS1 4AP")
        assert quality.fallback is True
        assert 0.35 <= quality.outstanding_share <= 0.6

    async def test_error_falls_back(self, offline):
        quality = await get_school_quality("M14 6LT")
        assert quality.fallback is True
        assert 0.3 <= quality.outstanding_share <= 0.6
        assert 0.35 <= quality.good_share <= 0.6


class TestNuisanceReports:
    async def test_matches_authority(self):
        with patch("forecaster.data.nuisance.fetch_text", new_callable=AsyncMock, return_value=NUISANCE_CSV):
            reports = await get_nuisance_reports("manchester")
        assert reports.complaints == 1843
        assert reports.reference_year == "2022/23"

    async def test_missing_year_defaults(self):
        with patch("forecaster.data.nuisance.fetch_text", new_callable=AsyncMock, return_value=NUISANCE_CSV):
            reports = await get_nuisance_reports("Salford")
        assert reports.reference_year == "2023/24"

    async def test_unknown_authority(self):
        with patch("forecaster.data.nuisance.fetch_text", new_callable=AsyncMock, return_value=NUISANCE_CSV):
            reports = await get_nuisance_reports("Leeds")
        assert reports.complaints == 0
        assert reports.fallback is False

    async def test_error_falls_back(self, offline):
        reports = await get_nuisance_reports("Manchester")
        assert reports.fallback is True
        assert 120 <= reports.complaints <= 520
