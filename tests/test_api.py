"""Tests for geohash-ranges API endpoints."""


class TestRootEndpoints:
    """Tests for root and health endpoints."""

    def test_root(self, client):
        """Root endpoint should return service info."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "geohash-ranges"
        assert "version" in data

    def test_health(self, client):
        """Health endpoint should return healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestEncode:
    """Tests for the encode endpoint."""

    def test_default_precision(self, client):
        response = client.post("/encode", json={"lat": 37.7853074, "lon": -122.4054274})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["geohash"] == "9q8yywe56g"
        assert data["precision"] == 10

    def test_explicit_precision(self, client):
        response = client.post(
            "/encode",
            json={"lat": 37.7853074, "lon": -122.4054274, "precision": 8},
        )
        assert response.status_code == 200
        assert response.json()["geohash"] == "9q8yywe5"

    def test_configured_default_precision(self, client, override_settings):
        override_settings(default_precision=6)
        response = client.post("/encode", json={"lat": -90, "lon": -180})
        assert response.status_code == 200
        assert response.json()["geohash"] == "000000"

    def test_precision_clamped(self, client):
        """Out-of-range precision is clamped, not rejected."""
        response = client.post("/encode", json={"lat": 90, "lon": 180, "precision": 40})
        assert response.status_code == 200
        data = response.json()
        assert data["precision"] == 22
        assert len(data["geohash"]) == 22
        # The last longitude halvings run out of float precision
        assert data["geohash"].startswith("z" * 21)

    def test_latitude_out_of_range(self, client):
        response = client.post("/encode", json={"lat": 91, "lon": 0})
        assert response.status_code == 422


class TestQuery:
    """Tests for the single geohash query endpoint."""

    def test_query(self, client):
        response = client.post("/query", json={"geohash": "64m9yn96mx", "bits": 6})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["query"] == {"start": "60", "end": "6h"}

    def test_overflow_sentinel(self, client):
        response = client.post("/query", json={"geohash": "64z178", "bits": 12})
        assert response.status_code == 200
        assert response.json()["query"] == {"start": "64s", "end": "64~"}

    def test_uppercase_normalized(self, client):
        response = client.post("/query", json={"geohash": "64M9YN96MX", "bits": 10})
        assert response.status_code == 200
        assert response.json()["query"] == {"start": "64", "end": "65"}

    def test_invalid_geohash(self, client):
        response = client.post("/query", json={"geohash": "64a", "bits": 10})
        assert response.status_code == 422

    def test_bits_out_of_range(self, client):
        response = client.post("/query", json={"geohash": "64m9", "bits": 0})
        assert response.status_code == 422


class TestQueries:
    """Tests for the circle queries endpoint."""

    def test_tokyo(self, client):
        response = client.post(
            "/queries",
            json={"center": {"lat": 35.68944, "lon": 139.69167}, "radius_km": 10},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["bits"] == 20
        assert data["precision"] == 4
        assert data["queries"] == [
            {"start": "xn77", "end": "xn78"},
            {"start": "xn76", "end": "xn77"},
        ]

    def test_radius_exceeds_maximum(self, client, override_settings):
        override_settings(max_radius_km=5)
        response = client.post(
            "/queries",
            json={"center": {"lat": 0, "lon": 0}, "radius_km": 10},
        )
        assert response.status_code == 400

    def test_non_positive_radius(self, client):
        response = client.post(
            "/queries",
            json={"center": {"lat": 0, "lon": 0}, "radius_km": 0},
        )
        assert response.status_code == 422
