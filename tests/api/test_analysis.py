from decimal import Decimal

import httpx

from forecaster.data import base


class TestAnalyze:
    def test_defaults(self, client):
        resp = client.post("/api/v1/analyze", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert len(body["ledger"]) == 11
        assert Decimal(body["stamp_duty"]) == Decimal("2500")
        assert Decimal(body["cash_invested"]) == Decimal("67500")
        assert body["score_band"] in {"strong", "fair", "weak"}

    def test_cash_purchase(self, client):
        body = client.post("/api/v1/analyze", json={"deposit_pct": 1}).json()
        assert Decimal(body["dscr"]) == 0
        assert Decimal(body["loan_amount"]) == 0

    def test_company_buyer(self, client):
        body = client.post("/api/v1/analyze", json={"buyer_type": "company"}).json()
        assert Decimal(body["stamp_duty"]) == Decimal("15000")

    def test_exit_year(self, client):
        body = client.post("/api/v1/analyze", json={"exit_year": 5}).json()
        assert body["exit_year"] == 5
        assert len(body["cash_flows"]) == 6

    def test_rejects_zero_term(self, client):
        assert client.post("/api/v1/analyze", json={"mortgage_years": 0}).status_code == 422

    def test_rejects_unknown_buyer(self, client):
        assert client.post("/api/v1/analyze", json={"buyer_type": "trust"}).status_code == 422


class TestStampDuty:
    def test_standard(self, client):
        body = client.post("/api/v1/stamp-duty", json={"price": 300000}).json()
        assert Decimal(body["total"]) == Decimal("5000")
        assert len(body["bands"]) == 3
        assert body["first_time_buyer_relief"] is False

    def test_first_time_buyer(self, client):
        body = client.post("/api/v1/stamp-duty", json={"price": 400000, "first_time_buyer": True}).json()
        assert body["first_time_buyer_relief"] is True
        assert Decimal(body["total"]) == Decimal("5000")

    def test_additional_property(self, client):
        body = client.post(
            "/api/v1/stamp-duty", json={"price": 300000, "properties_owned": 2}
        ).json()
        assert body["additional_property"] is True
        assert Decimal(body["surcharge"]) == Decimal("15000")
        assert Decimal(body["total"]) == Decimal("20000")


class TestSignals:
    def test_offline_sources_marked(self, client, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        monkeypatch.setattr(
            base, "_client", lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler))
        )
        resp = client.get("/api/v1/signals", params={"postcode": "m146lt", "admin_district": "Manchester"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["location"]["postcode"] == "M14 6LT"
        assert "land_registry" in body["fallback_sources"]
        assert body["flood"]["band"] == "low"
        assert body["land_registry"]["count"] == 24
