"""
Optional query parameters for Twelve Data requests.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from tdrequest.td_enum import ExchangeType, InstrumentType, ResponseDataFormat


@dataclass(frozen=True)
class TimeSeriesParams:
    """
    Optional parameters of a time series request.

    A field left as None is omitted from the query so the server applies
    its own default.
    """

    # Exchange where instrument is traded.
    exchange: Optional[str] = None
    # Country where instrument is traded.
    country: Optional[str] = None
    # Type to which instrument belongs.
    instrument_type: Optional[InstrumentType] = None
    # Number of data points between 1 and 5000. Server defaults to 30.
    output_size: Optional[int] = None
    # Format of the response data. Server defaults to JSON.
    format: Optional[ResponseDataFormat] = None

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Return the set fields as ordered (key, value) pairs."""
        pairs = []
        if self.exchange is not None:
            pairs.append(("exchange", self.exchange))
        if self.country is not None:
            pairs.append(("country", self.country))
        if self.instrument_type is not None:
            pairs.append(("type", self.instrument_type.as_str()))
        if self.output_size is not None:
            pairs.append(("outputsize", str(self.output_size)))
        if self.format is not None:
            pairs.append(("format", self.format.as_str()))
        return pairs

    def to_query(self) -> str:
        """
        Render the set fields as a fragment appended after an existing
        key=value pair. Values are not percent-encoded.
        """
        return "".join(f"&{key}={value}" for key, value in self.to_pairs())

    def __str__(self) -> str:
        return self.to_query()


@dataclass(frozen=True)
class ExchangesParams:
    """
    Optional parameters of an exchange listing request.
    """

    exchange_type: Optional[ExchangeType] = None


class TimeSeriesParamsBuilder:
    """
    Populate a TimeSeriesParams one field at a time.
    """

    def __init__(self):
        self._params = TimeSeriesParams()

    def exchange(self, exchange: str) -> "TimeSeriesParamsBuilder":
        self._params = replace(self._params, exchange=exchange)
        return self

    def country(self, country: str) -> "TimeSeriesParamsBuilder":
        self._params = replace(self._params, country=country)
        return self

    def instrument_type(
        self, instrument_type: InstrumentType
    ) -> "TimeSeriesParamsBuilder":
        self._params = replace(self._params, instrument_type=instrument_type)
        return self

    def output_size(self, output_size: int) -> "TimeSeriesParamsBuilder":
        self._params = replace(self._params, output_size=output_size)
        return self

    def format(self, data_format: ResponseDataFormat) -> "TimeSeriesParamsBuilder":
        self._params = replace(self._params, format=data_format)
        return self

    def build(self) -> TimeSeriesParams:
        return self._params


class ExchangesParamsBuilder:
    """
    Populate an ExchangesParams.
    """

    def __init__(self):
        self._params = ExchangesParams()

    def exchange_type(self, exchange_type: ExchangeType) -> "ExchangesParamsBuilder":
        self._params = replace(self._params, exchange_type=exchange_type)
        return self

    def build(self) -> ExchangesParams:
        return self._params
