import pytest
from fastapi.testclient import TestClient

from src.domain.entities.model_response import RawModelResponse
from src.domain.exceptions import FETCH_FAILED_MESSAGE
from src.infrastructure.entrypoints.fastapi_app import app, get_analyze_use_case
from tests.fakes import FakeSearchModel


@pytest.fixture
def client_for(make_use_case):
    def _client(model: FakeSearchModel) -> TestClient:
        app.dependency_overrides[get_analyze_use_case] = lambda: make_use_case(model)
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_analyze_returns_snapshot(client_for, fake_model):
    response = client_for(fake_model).post("/analyze", json={"ticker": "aapl"})

    assert response.status_code == 200
    body = response.json()
    assert body["ticker"] == "AAPL"
    assert body["price_text"] == "150.25"
    assert body["change_percent"] == 1.5
    assert len(body["series"]) == 30
    assert body["series"][-1]["value"] == 150.25
    assert body["sources"] == [{"title": "Reuters", "url": "https://reuters.com/aapl"}]


def test_blank_ticker_is_unprocessable(client_for, fake_model):
    response = client_for(fake_model).post("/analyze", json={"ticker": " "})

    assert response.status_code == 422
    assert fake_model.calls == []


def test_model_failure_is_bad_gateway(client_for):
    model = FakeSearchModel(error=ConnectionError("boom"))

    response = client_for(model).post("/analyze", json={"ticker": "tsla"})

    assert response.status_code == 502
    assert response.json() == {"detail": FETCH_FAILED_MESSAGE}


def test_degraded_response_still_succeeds(client_for):
    model = FakeSearchModel(RawModelResponse(text="PRICE: N/A\nANALYSIS: No data found."))

    body = client_for(model).post("/analyze", json={"ticker": "zzzz"}).json()

    assert body["price_text"] == "N/A"
    assert {p["value"] for p in body["series"]} == {100}


def test_suggestions_and_health(client_for, fake_model):
    client = client_for(fake_model)

    assert client.get("/suggestions").json()["suggestions"][0] == "AAPL"
    assert client.get("/health").json() == {"status": "ok"}
