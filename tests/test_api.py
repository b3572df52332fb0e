"""Tests for API endpoints."""

from datetime import datetime, timedelta

import pytest


def parse_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.mark.asyncio
class TestCreateEndpoint:
    """POST /shorturls."""

    async def test_shorten_url(self, client, clock, sample_urls):
        response = await client.post("/shorturls", json={"url": sample_urls[0]})

        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"shortlink", "expiry"}
        code = data["shortlink"].rsplit("/", 1)[-1]
        assert data["shortlink"] == f"http://testserver/{code}"
        assert len(code) == 6 and code.isalnum()
        assert parse_iso(data["expiry"]) == clock.now + timedelta(minutes=30)
        assert data["expiry"].endswith("Z")

    async def test_shorten_with_custom_code_and_validity(self, client, clock, sample_urls):
        response = await client.post(
            "/shorturls",
            json={"url": sample_urls[0], "validity": 45, "shortcode": "test123"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["shortlink"] == "http://testserver/test123"
        assert parse_iso(data["expiry"]) == clock.now + timedelta(minutes=45)

    async def test_shorten_empty_shortcode_generates_code(self, client, sample_urls):
        response = await client.post(
            "/shorturls", json={"url": sample_urls[0], "shortcode": ""}
        )

        assert response.status_code == 201
        code = response.json()["shortlink"].rsplit("/", 1)[-1]
        assert len(code) == 6 and code.isalnum()

    async def test_shorten_whole_float_validity(self, client, clock, sample_urls):
        response = await client.post(
            "/shorturls", json={"url": sample_urls[0], "validity": 30.0}
        )

        assert response.status_code == 201
        assert parse_iso(response.json()["expiry"]) == clock.now + timedelta(minutes=30)

    async def test_shorten_invalid_url(self, client):
        response = await client.post("/shorturls", json={"url": "not-a-url"})

        assert response.status_code == 400
        assert "Invalid URL" in response.json()["error"]

    async def test_shorten_missing_url(self, client):
        response = await client.post("/shorturls", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required field: url"}

    @pytest.mark.parametrize("validity", [0, -1, 1.5, "30", True])
    async def test_shorten_invalid_validity(self, client, sample_urls, validity):
        response = await client.post(
            "/shorturls", json={"url": sample_urls[0], "validity": validity}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Validity must be a positive integer (minutes)"}

    async def test_shorten_non_string_shortcode(self, client, sample_urls):
        response = await client.post(
            "/shorturls", json={"url": sample_urls[0], "shortcode": 12345}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Shortcode must be a string"}

    @pytest.mark.parametrize("shortcode", ["abc", "elevenchars", "has space", "dash-code"])
    async def test_shorten_invalid_shortcode_format(self, client, sample_urls, shortcode):
        response = await client.post(
            "/shorturls", json={"url": sample_urls[0], "shortcode": shortcode}
        )

        assert response.status_code == 400
        assert "Invalid shortcode format" in response.json()["error"]

    async def test_shorten_malformed_json(self, client):
        response = await client.post(
            "/shorturls",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_shorten_duplicate_custom_code(self, client, sample_urls):
        first = await client.post(
            "/shorturls", json={"url": sample_urls[0], "shortcode": "dupe123"}
        )
        assert first.status_code == 201

        response = await client.post(
            "/shorturls", json={"url": sample_urls[1], "shortcode": "dupe123"}
        )

        assert response.status_code == 409
        assert response.json() == {"error": "Shortcode already in use"}

        stats = await client.get("/shorturls/dupe123")
        assert stats.json()["originalUrl"] == sample_urls[0]

    async def test_generation_failure_is_internal_error(self, client, store, sample_urls):
        store.generator.max_attempts = 1
        store.generator.generate_random = lambda length=None: "always"
        await client.post("/shorturls", json={"url": sample_urls[0]})

        response = await client.post("/shorturls", json={"url": sample_urls[1]})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


@pytest.mark.asyncio
class TestRedirectEndpoint:
    """GET /{shortcode}."""

    async def test_redirect(self, client, store, sample_urls):
        await client.post("/shorturls", json={"url": sample_urls[0], "shortcode": "go1234"})

        response = await client.get(
            "/go1234",
            headers={"Referer": "https://news.example/item"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == sample_urls[0]
        clicks = store.get("go1234").clicks
        assert len(clicks) == 1
        assert clicks[0].referrer == "https://news.example/item"
        assert clicks[0].geo == "unknown"

    async def test_redirect_without_referrer(self, client, store, sample_urls):
        await client.post("/shorturls", json={"url": sample_urls[0], "shortcode": "go1234"})

        await client.get("/go1234", follow_redirects=False)

        assert store.get("go1234").clicks[0].referrer == "direct"

    async def test_redirect_unknown(self, client):
        response = await client.get("/nothere", follow_redirects=False)

        assert response.status_code == 404
        assert response.json() == {"error": "Shortcode not found"}

    async def test_redirect_expired(self, client, clock, store, sample_urls):
        await client.post(
            "/shorturls", json={"url": sample_urls[0], "shortcode": "old123", "validity": 1}
        )
        clock.advance(minutes=1)

        response = await client.get("/old123", follow_redirects=False)

        assert response.status_code == 410
        assert response.json() == {"error": "Short link has expired"}
        assert store.get("old123").clicks == []


@pytest.mark.asyncio
class TestStatsEndpoints:
    """GET /shorturls and GET /shorturls/{shortcode}."""

    async def test_get_stats(self, client, clock, sample_urls):
        await client.post("/shorturls", json={"url": sample_urls[0], "shortcode": "stat1"})
        clock.advance(seconds=10)
        await client.get("/stat1", headers={"Referer": "https://a.example/"}, follow_redirects=False)
        clock.advance(seconds=10)
        await client.get("/stat1", follow_redirects=False)

        response = await client.get("/shorturls/stat1")

        assert response.status_code == 200
        data = response.json()
        assert data["originalUrl"] == sample_urls[0]
        assert data["totalClicks"] == 2
        assert parse_iso(data["expiry"]) - parse_iso(data["createdAt"]) == timedelta(minutes=30)
        assert [c["referrer"] for c in data["clicks"]] == ["https://a.example/", "direct"]
        assert all(set(c) == {"time", "referrer", "geo"} for c in data["clicks"])
        assert parse_iso(data["clicks"][0]["time"]) < parse_iso(data["clicks"][1]["time"])

    async def test_get_stats_not_found(self, client):
        response = await client.get("/shorturls/nonexistent")

        assert response.status_code == 404
        assert response.json() == {"error": "Shortcode not found"}

    async def test_list_urls_empty(self, client):
        response = await client.get("/shorturls")

        assert response.status_code == 200
        assert response.json() == []

    async def test_list_urls(self, client, clock, sample_urls):
        await client.post("/shorturls", json={"url": sample_urls[0], "shortcode": "first1"})
        await client.post("/shorturls", json={"url": sample_urls[1], "shortcode": "second2", "validity": 1})
        await client.get("/first1", follow_redirects=False)
        clock.advance(minutes=5)

        response = await client.get("/shorturls")

        assert response.status_code == 200
        data = response.json()
        assert [item["shortcode"] for item in data] == ["first1", "second2"]
        assert data[0]["shortlink"] == "http://testserver/first1"
        assert data[0]["totalClicks"] == 1
        assert data[0]["url"] == sample_urls[0]
        # Expired entries are still listed
        assert data[1]["totalClicks"] == 0


@pytest.mark.asyncio
class TestFallbacks:
    """Unmatched routes and unexpected failures."""

    async def test_unmatched_route(self, client):
        response = await client.get("/a/b/c")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    async def test_trailing_slash_is_not_redirected(self, client):
        response = await client.get("/shorturls/", follow_redirects=False)

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    async def test_method_not_allowed(self, client):
        response = await client.delete("/shorturls")

        assert response.status_code == 405
        assert "error" in response.json()

    async def test_internal_error_is_generic(self, client, service, sample_urls):
        async def boom():
            raise RuntimeError("secret internals")

        service.list_urls = boom

        response = await client.get("/shorturls")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
        assert "secret" not in response.text

    async def test_cors_headers(self, client):
        response = await client.get("/shorturls", headers={"Origin": "http://ui.example"})

        assert response.headers.get("access-control-allow-origin") == "*"
