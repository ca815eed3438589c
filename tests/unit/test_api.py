import pytest
from fastapi.testclient import TestClient

from auction_lint.api import app
from auction_lint.api.dependencies import get_oracle
from auction_lint.services.oracle import OracleTransportError


@pytest.fixture
def client():
    app.dependency_overrides[get_oracle] = lambda: None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def client_with_oracle(fake_oracle):
    def _make(**replies):
        oracle = fake_oracle(**replies)
        app.dependency_overrides[get_oracle] = lambda: oracle
        return TestClient(app), oracle

    yield _make
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "AuctionLint"
    assert response.json()["status"] == "running"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_artist_detection_with_rules(client):
    response = client.post(
        "/api/v1/artist-detection",
        json={"title": "FAT, stengods, Royal Copenhagen, Danmark. Niels Thorsson"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["reason"] is None
    assert data["results"][0]["detected_artist"] == "Niels Thorsson"
    assert data["results"][0]["source"] == "rules"
    assert data["results"][0]["object_type"] == "FAT"


def test_artist_detection_no_result(client):
    response = client.post("/api/v1/artist-detection", json={"title": "VAS, glas, kristall, Orrefors"})

    assert response.status_code == 200
    assert response.json()["results"] == []


def test_artist_detection_oracle_says_no(client_with_oracle):
    client, oracle = client_with_oracle(detect_artist={"hasArtist": False})

    response = client.post(
        "/api/v1/artist-detection",
        json={"title": "FAT, stengods, Royal Copenhagen, Danmark. Niels Thorsson"},
    )

    assert response.json() == {"results": [], "reason": "oracle found no artist"}


def test_artist_detection_with_verification(client_with_oracle):
    client, _ = client_with_oracle(
        detect_artist={"hasArtist": True, "artistName": "Niels Thorsson", "confidence": 0.9},
        verify_artist={"isVerified": True, "biography": "Dansk keramiker"},
    )

    response = client.post(
        "/api/v1/artist-detection",
        json={"title": "FAT, stengods, Royal Copenhagen, Danmark. Niels Thorsson"},
    )

    result = response.json()["results"][0]
    assert result["source"] == "ai"
    assert result["verification"]["is_verified"] is True


def test_artist_detection_skips_dismissed_artist(client):
    response = client.post(
        "/api/v1/artist-detection",
        json={
            "title": "FAT, stengods, Royal Copenhagen, Danmark. Niels Thorsson",
            "session": {"ignored_terms": ["niels thorsson"]},
        },
    )

    assert response.status_code == 200
    assert response.json() == {"results": [], "reason": "artist ignored for this session"}


def test_artist_detection_validates_input(client):
    response = client.post("/api/v1/artist-detection", json={"artist_field_value": "x"})
    assert response.status_code == 422


def test_spellcheck(client):
    response = client.post(
        "/api/v1/spellcheck",
        json={"text": "Vas i krystal från Orefors", "field_type": "description"},
    )

    assert response.status_code == 200
    issues = response.json()["issues"]
    assert [i["original"] for i in issues] == ["Orefors", "krystal"]
    assert issues[0]["type"] == "brand"
    assert issues[1]["source"] == "dictionary"


def test_spellcheck_respects_session(client):
    response = client.post(
        "/api/v1/spellcheck",
        json={
            "text": "Vas i krystal från Orefors",
            "session": {"ignored_terms": ["Krystal"], "artist_field_value": "Orefors"},
        },
    )

    assert response.json()["issues"] == []


def test_spellcheck_survives_oracle_failure(client_with_oracle):
    client, _ = client_with_oracle(
        spellcheck=OracleTransportError("down"),
        check_brands=OracleTransportError("down"),
    )

    response = client.post("/api/v1/spellcheck", json={"text": "Vas i krystal", "field_type": "title"})

    assert [i["original"] for i in response.json()["issues"]] == ["krystal"]


def test_spellcheck_drops_out_of_range_oracle_confidence(client_with_oracle):
    client, _ = client_with_oracle(
        spellcheck={"issues": [{"original": "akverell", "corrected": "akvarell", "confidence": 1.5}]},
        check_brands={"issues": []},
    )

    response = client.post("/api/v1/spellcheck", json={"text": "Vas i krystal, akverell", "field_type": "title"})

    assert response.status_code == 200
    assert [i["original"] for i in response.json()["issues"]] == ["krystal"]


def test_spellcheck_rejects_unknown_field_type(client):
    response = client.post("/api/v1/spellcheck", json={"text": "Vas i krystal", "field_type": "footer"})
    assert response.status_code == 422


def test_artist_field_check(client):
    response = client.post("/api/v1/spellcheck/artist-field", json={"text": "lisa larson"})

    issues = response.json()["issues"]
    assert issues[0]["corrected"] == "Lisa Larson"
    assert issues[0]["type"] == "artist_case"
