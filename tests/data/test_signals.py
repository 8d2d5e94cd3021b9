from decimal import Decimal

from forecaster.data.signals import assemble_property_signals
from forecaster.models.signals import PropertyLocation


class TestAssemblePropertySignals:
    async def test_everything_offline(self, offline):
        location = PropertyLocation(
            postcode="M14 6LT",
            latitude=53.4509,
            longitude=-2.2196,
            admin_district="Manchester",
            region_code="E12000002",
            hint_price=Decimal("220000"),
        )
        signals = await assemble_property_signals(location)
        assert signals.location == location
        assert set(signals.fallback_sources) == {
            "land_registry", "house_price_index", "rent_index", "planning", "flood",
            "air_quality", "noise", "crime", "schools", "nuisance",
        }
        assert signals.land_registry.count == 24

    async def test_no_coordinates_skips_point_sources(self, offline):
        signals = await assemble_property_signals(PropertyLocation(postcode="M14 6LT"))
        assert signals.flood.band == "low"
        assert signals.air_quality.aqi == 3
        assert signals.crime.count == 0
        assert "flood" not in signals.fallback_sources
        assert "crime" not in signals.fallback_sources

    async def test_deterministic(self, offline):
        location = PropertyLocation(postcode="M14 6LT", latitude=53.45, longitude=-2.22)
        first = await assemble_property_signals(location)
        second = await assemble_property_signals(location)
        assert first.crime == second.crime
        assert first.noise == second.noise
        assert first.nuisance == second.nuisance
