"""
Build request URLs for the Twelve Data API.
"""

import logging

from tdrequest._utils.request_url_constructor import request_url_constructor
from tdrequest.params import TimeSeriesParams
from tdrequest.td_enum import Interval, TDEndpoint

URL_PREFIX = "https://api.twelvedata.com/"

logger = logging.getLogger(__name__)


class TDRequestBuilder:
    """
    Build request URLs for the Twelve Data API.

    Holds the API key only; every call is a pure string assembly and the
    returned URL is meant for an HTTP client chosen by the caller.
    """

    def __init__(self, apikey: str):
        self.apikey = apikey

    def exchanges(self) -> str:
        """Return the bare path of the exchange listing endpoint."""
        return TDEndpoint.EXCHANGES.path

    def exchanges_url(self) -> str:
        """Return the fully-qualified exchange listing URL."""
        return request_url_constructor(
            base_url=URL_PREFIX,
            endpoint=TDEndpoint.EXCHANGES.endpoint,
            api_key=self.apikey,
            requires_symbol=TDEndpoint.EXCHANGES.requires_symbol,
        )

    def time_series(
        self,
        symbol: str,
        interval: Interval,
        params: TimeSeriesParams = None,
    ) -> str:
        """Return the time series URL for a symbol at the given interval."""
        if params is None:
            params = TimeSeriesParams()

        url = request_url_constructor(
            base_url=URL_PREFIX,
            endpoint=TDEndpoint.TIME_SERIES.endpoint,
            api_key=self.apikey,
            symbol=symbol,
            interval=interval.as_str(),
            optional_params=params.to_query(),
            requires_symbol=TDEndpoint.TIME_SERIES.requires_symbol,
        )
        logger.debug(f"Built time_series URL for {symbol} at {interval.as_str()}")
        return url
