"""
Flask service exposing Twelve Data URL construction to other services.
"""

import os
import logging
from functools import wraps
from flask import Flask, request, jsonify

from tdrequest._utils.get_path import get_path
from tdrequest._utils.load_credentials import load_credentials
from tdrequest.params import TimeSeriesParamsBuilder
from tdrequest.request_builder import TDRequestBuilder
from tdrequest.td_enum import InstrumentType, Interval, ResponseDataFormat

logger = logging.getLogger(__name__)


def requires_api_key(f):
    """Decorator to require an API key for a route."""

    @wraps(f)
    def decorated(*args, **kwargs):
        api_key = request.headers.get("x-api-key")
        if not api_key:
            return (
                jsonify(
                    {
                        "status": "error",
                        "message": "API key is missing",
                        "error_type": "authentication",
                    }
                ),
                401,
            )

        if api_key != os.getenv("TDREQUEST_API_KEY"):
            logger.warning(f"Invalid API key attempt: {api_key[:8]}...")
            return (
                jsonify(
                    {
                        "status": "error",
                        "message": "Invalid API key",
                        "error_type": "authentication",
                    }
                ),
                403,
            )

        return f(*args, **kwargs)

    return decorated


def parse_output_size(value):
    """Accept an int or a string of digits; bools and floats are rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    raise ValueError(f"Invalid outputsize: {value!r}")


def params_from_request(data):
    """Build TimeSeriesParams from the optional fields of a request body."""
    builder = TimeSeriesParamsBuilder()

    if data.get("exchange") is not None:
        builder.exchange(data["exchange"])
    if data.get("country") is not None:
        builder.country(data["country"])
    if data.get("type") is not None:
        builder.instrument_type(InstrumentType.from_token(data["type"]))
    if data.get("outputsize") is not None:
        builder.output_size(parse_output_size(data["outputsize"]))
    if data.get("format") is not None:
        builder.format(ResponseDataFormat.from_token(data["format"]))

    return builder.build()


def create_app(td_api_key: str = None) -> Flask:
    """
    Create the URL service app.

    The Twelve Data key is read from the credentials file (or
    TWELVEDATA_API_KEY) when not given.
    """
    if td_api_key is None:
        td_api_key = load_credentials(get_path("creds"), "twelvedata_api")

    app = Flask(__name__)
    app.config["TD_REQUEST_BUILDER"] = TDRequestBuilder(td_api_key)

    @app.route("/tdrequest/time_series", methods=["POST"])
    @requires_api_key
    def time_series():
        """Endpoint to build time series URLs for a list of symbols."""
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        logger.info(
            f"Received time_series request for {data.get('symbols')} "
            f"at {data.get('interval')}"
        )

        symbols = data.get("symbols")
        interval = data.get("interval")

        if isinstance(symbols, str):
            symbols = [symbols]

        if not symbols:
            return jsonify({"error": "Symbol is required"}), 400
        if not interval:
            return jsonify({"error": "Interval is required"}), 400

        try:
            interval = Interval.from_token(interval)
            params = params_from_request(data)
        except ValueError as e:
            logger.error(f"Invalid time_series request: {e}")
            return jsonify({"error": str(e)}), 400

        builder = app.config["TD_REQUEST_BUILDER"]
        urls = {symbol: builder.time_series(symbol, interval, params) for symbol in symbols}

        return jsonify({"status": "completed", "urls": urls}), 200

    @app.route("/tdrequest/exchanges", methods=["GET"])
    @requires_api_key
    def exchanges():
        """Endpoint returning both shapes of the exchange listing request."""
        builder = app.config["TD_REQUEST_BUILDER"]
        return jsonify({"path": builder.exchanges(), "url": builder.exchanges_url()}), 200

    return app
