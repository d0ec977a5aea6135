"""
Enums for Twelve Data request tokens and endpoints.
"""

from enum import Enum, auto


class TokenEnum(Enum):
    """
    Base for enums whose value is the token the Twelve Data API expects.
    """

    def as_str(self) -> str:
        """Return the external token for this member."""
        return self.value

    @classmethod
    def from_token(cls, token: str):
        """Get enum member by external token"""
        try:
            return next(member for member in cls if member.value == token)
        except StopIteration:
            raise ValueError(f"Unsupported {cls.__name__}: {token}")


class Interval(TokenEnum):
    """
    Sampling interval of a time series.
    """

    MINUTES_1 = "1min"
    MINUTES_5 = "5min"
    MINUTES_15 = "15min"
    MINUTES_30 = "30min"
    MINUTES_45 = "45min"
    HOURS_1 = "1h"
    HOURS_2 = "2h"
    HOURS_4 = "4h"
    DAYS_1 = "1day"
    WEEKS_1 = "1week"
    MONTHS_1 = "1month"


class InstrumentType(TokenEnum):
    """
    Type to which an instrument belongs.
    """

    STOCK = "Stock"
    INDEX = "Index"
    ETF = "ETF"
    REIT = "REIT"


class ResponseDataFormat(TokenEnum):
    """
    Format of the response data.
    """

    CSV = "CSV"
    JSON = "JSON"


class ExchangeType(Enum):
    """
    Filter for the exchange listing.

    No external token is defined for these members yet, so they cannot be
    rendered into a query string.
    """

    STOCK = auto()
    INDEX = auto()
    ETF = auto()


class TDEndpoint(Enum):
    """
    Enum for Twelve Data API endpoints.
    """

    TIME_SERIES = ("time_series", True)
    EXCHANGES = ("exchanges", False)

    def __init__(self, endpoint: str, requires_symbol: bool):
        self.endpoint = endpoint
        self.requires_symbol = requires_symbol

    @property
    def path(self) -> str:
        """Bare path segment of the endpoint."""
        return f"/{self.endpoint}"

    @classmethod
    def get_by_endpoint(cls, endpoint: str) -> "TDEndpoint":
        """Get enum member by endpoint string"""
        try:
            return next(e for e in cls if e.endpoint == endpoint)
        except StopIteration:
            raise ValueError(f"Unsupported endpoint: {endpoint}")
