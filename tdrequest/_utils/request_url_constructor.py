"""
Construct the URL for the Twelve Data API.
"""


def request_url_constructor(
    base_url: str = None,
    endpoint: str = None,
    api_key: str = None,
    symbol: str = None,
    interval: str = None,
    optional_params: str = "",
    requires_symbol: bool = True,
):
    """
    Construct the URL for the Twelve Data API.

    The result has the shape
    {base_url}{endpoint}?[symbol=..&interval=..&]apikey=..{optional_params}
    with every part emitted verbatim.
    """
    if base_url is None:
        raise ValueError("base_url is required")
    if endpoint is None:
        raise ValueError("endpoint is required")
    if api_key is None:
        raise ValueError("api_key is required")

    compiled_url = f"{base_url}{endpoint}?"

    if requires_symbol:
        if symbol is None:
            raise ValueError("symbol is required")
        else:
            compiled_url += f"symbol={symbol}&"

        if interval is None:
            raise ValueError("interval is required")
        else:
            compiled_url += f"interval={interval}&"

    compiled_url += f"apikey={api_key}"

    # Add optional parameters
    if optional_params:
        compiled_url += optional_params

    return compiled_url
