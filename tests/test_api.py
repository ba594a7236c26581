"""HTTP surface tests using FastAPI's TestClient."""

from __future__ import annotations


def _scenario_b_payload() -> dict:
    return {
        "includesPhotography": False,
        "includesVideography": True,
        "serviceTier": "platinum",
        "videoRateType": "fullDay",
        "videoDays": 2,
        "numReels": 2,
        "reelDuration": 30,
        "numRecaps": 1,
        "recapDuration": 90,
        "clientCoversTravel": True,
        "deliverySpeed": "expedited",
    }


class TestHealth:

    def test_health(self, client) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestQuoteEndpoint:

    def test_quote_camel_case_body(self, client) -> None:
        response = client.post("/quote", json=_scenario_b_payload())

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3400
        assert [item["amount"] for item in body["breakdown"]] == [2800, 200, 300, 100]
        assert body["breakdown"][0]["description"] == "platinum Video Coverage (2 full days)"

    def test_quote_snake_case_body(self, client) -> None:
        response = client.post("/quote", json={"travel_distance": 500})

        assert response.status_code == 200
        assert response.json() == {
            "breakdown": [{"description": "Travel (500 miles)", "amount": 1000}],
            "total": 1000,
        }

    def test_unknown_tier_is_bad_request(self, client) -> None:
        response = client.post("/quote", json={"serviceTier": "silver"})

        assert response.status_code == 400
        assert "silver" in response.json()["detail"]

    def test_negative_quantity_is_bad_request(self, client) -> None:
        response = client.post("/quote", json={"travelDistance": -1})
        assert response.status_code == 400

    def test_non_integer_count_is_schema_error(self, client) -> None:
        response = client.post("/quote", json={"numReels": "several"})
        assert response.status_code == 422


class TestEstimateEndpoint:

    def test_available(self, client) -> None:
        response = client.post("/quote/estimate", json=_scenario_b_payload())

        assert response.status_code == 200
        assert response.json() == {"available": True, "total": 3400}

    def test_unavailable_instead_of_error(self, client) -> None:
        response = client.post("/quote/estimate", json={"deliverySpeed": "overnight"})

        assert response.status_code == 200
        assert response.json() == {"available": False, "total": None}


class TestCatalogEndpoints:

    def test_tiers(self, client) -> None:
        response = client.get("/tiers")

        assert response.status_code == 200
        tiers = response.json()
        assert [t["tier"] for t in tiers] == ["platinum", "gold", "bronze"]
        assert tiers[0]["photography_rates"]["full_day"] == 1099
        assert tiers[0]["video_features"][0] == "4K recording"

    def test_max_reels_hourly(self, client) -> None:
        response = client.get("/reels/max", params={"videoRateType": "hourly", "videoDuration": 2})

        assert response.status_code == 200
        assert response.json() == {"maxReels": 5}

    def test_max_reels_half_day(self, client) -> None:
        response = client.get("/reels/max", params={"videoRateType": "halfDay", "videoDays": 1})
        assert response.json() == {"maxReels": 13}

    def test_max_reels_unknown_rate_type(self, client) -> None:
        response = client.get("/reels/max", params={"videoRateType": "weekly"})
        assert response.status_code == 400
