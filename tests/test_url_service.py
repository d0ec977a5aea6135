import pytest

from tdrequest.url_service import create_app

HEADERS = {"x-api-key": "service_key"}


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("TDREQUEST_API_KEY", "service_key")
    app = create_app("test_api_key")
    app.config["TESTING"] = True
    return app.test_client()


def test_missing_api_key(client):
    response = client.get("/tdrequest/exchanges")
    assert response.status_code == 401
    assert response.get_json()["error_type"] == "authentication"


def test_invalid_api_key(client):
    response = client.get("/tdrequest/exchanges", headers={"x-api-key": "wrong"})
    assert response.status_code == 403
    assert response.get_json()["message"] == "Invalid API key"


def test_exchanges(client):
    response = client.get("/tdrequest/exchanges", headers=HEADERS)
    assert response.status_code == 200
    assert response.get_json() == {
        "path": "/exchanges",
        "url": "https://api.twelvedata.com/exchanges?apikey=test_api_key",
    }


def test_time_series(client):
    response = client.post(
        "/tdrequest/time_series",
        json={
            "symbols": ["AAPL", "MSFT"],
            "interval": "1min",
            "type": "ETF",
            "outputsize": "100",
        },
        headers=HEADERS,
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "completed"
    assert body["urls"]["AAPL"] == (
        "https://api.twelvedata.com/time_series?symbol=AAPL&interval=1min"
        "&apikey=test_api_key&type=ETF&outputsize=100"
    )
    assert body["urls"]["MSFT"].startswith(
        "https://api.twelvedata.com/time_series?symbol=MSFT&"
    )


def test_time_series_single_symbol(client):
    response = client.post(
        "/tdrequest/time_series",
        json={"symbols": "AAPL", "interval": "1day"},
        headers=HEADERS,
    )
    assert response.status_code == 200
    assert list(response.get_json()["urls"]) == ["AAPL"]


@pytest.mark.parametrize(
    "body, message",
    [
        ({"interval": "1min"}, "Symbol is required"),
        ({"symbols": ["AAPL"]}, "Interval is required"),
        ({"symbols": ["AAPL"], "interval": "3min"}, "Unsupported Interval: 3min"),
        ({"symbols": ["AAPL"], "interval": "1h", "format": "XML"}, "Unsupported ResponseDataFormat: XML"),
    ],
)
def test_time_series_bad_request(client, body, message):
    response = client.post("/tdrequest/time_series", json=body, headers=HEADERS)
    assert response.status_code == 400
    assert response.get_json()["error"] == message


@pytest.mark.parametrize("outputsize", ["many", "1.9", 1.9, True, [5], {"n": 5}])
def test_time_series_bad_outputsize(client, outputsize):
    response = client.post(
        "/tdrequest/time_series",
        json={"symbols": ["AAPL"], "interval": "1h", "outputsize": outputsize},
        headers=HEADERS,
    )
    assert response.status_code == 400
    assert response.get_json()["error"].startswith("Invalid outputsize")


@pytest.mark.parametrize("outputsize", [25, "25"])
def test_time_series_integer_outputsize(client, outputsize):
    response = client.post(
        "/tdrequest/time_series",
        json={"symbols": ["AAPL"], "interval": "1h", "outputsize": outputsize},
        headers=HEADERS,
    )
    assert response.status_code == 200
    assert response.get_json()["urls"]["AAPL"].endswith("&outputsize=25")


@pytest.mark.parametrize("body", [["AAPL"], "AAPL", 5])
def test_time_series_body_must_be_object(client, body):
    response = client.post("/tdrequest/time_series", json=body, headers=HEADERS)
    assert response.status_code == 400
    assert response.get_json()["error"] == "Request body must be a JSON object"


def test_create_app_reads_credentials(monkeypatch, tmp_path):
    monkeypatch.setenv("TDREQUEST_API_KEY", "service_key")
    monkeypatch.setenv("TDREQUEST_CREDS_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("TWELVEDATA_API_KEY", "env_key")
    client = create_app().test_client()

    response = client.get("/tdrequest/exchanges", headers=HEADERS)
    assert response.get_json()["url"].endswith("apikey=env_key")
