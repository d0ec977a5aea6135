from unittest import mock

from tdrequest._scripting import td_url_request


def test_build_payload_skips_unset_options():
    args = td_url_request.build_parser().parse_args(["-s", "AAPL,MSFT", "-o", "50"])
    assert td_url_request.build_payload(args) == {
        "symbols": ["AAPL", "MSFT"],
        "interval": "1min",
        "outputsize": 50,
    }


def test_main_requires_api_key(monkeypatch, capsys):
    monkeypatch.delenv("QT_TDREQUEST_API_KEY", raising=False)
    assert td_url_request.main(["-s", "AAPL"]) == 1
    assert "QT_TDREQUEST_API_KEY" in capsys.readouterr().out


def test_main_posts_to_service(monkeypatch, capsys):
    monkeypatch.setenv("QT_TDREQUEST_API_KEY", "service_key")
    response = mock.Mock(status_code=200, ok=True)
    response.json.return_value = {"status": "completed", "urls": {}}

    with mock.patch.object(td_url_request.requests, "post", return_value=response) as post:
        code = td_url_request.main(["-s", "AAPL", "-i", "1day", "-f", "CSV"])

    assert code == 0
    post.assert_called_once_with(
        td_url_request.URL,
        json={"symbols": ["AAPL"], "interval": "1day", "format": "CSV"},
        headers={"Content-Type": "application/json", "x-api-key": "service_key"},
    )
    assert "completed" in capsys.readouterr().out
