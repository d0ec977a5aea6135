"""
Request Twelve Data time series URLs from the tdrequest service.
"""

import argparse
import os
import sys
import requests

# Default values
URL = "http://localhost:8712/tdrequest/time_series"
INTERVAL = "1min"


def build_parser():
    """
    Build the command-line parser.
    """
    parser = argparse.ArgumentParser(description="Request Twelve Data URLs.")
    parser.add_argument(
        "-s",
        "--symbols",
        type=str,
        required=True,
        help="Comma-separated list of symbols",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=str,
        default=INTERVAL,
        help="Interval (default: {})".format(INTERVAL),
    )
    parser.add_argument("-x", "--exchange", type=str, help="Exchange (optional)")
    parser.add_argument("-c", "--country", type=str, help="Country (optional)")
    parser.add_argument("-t", "--type", type=str, help="Instrument type (optional)")
    parser.add_argument("-o", "--outputsize", type=int, help="Output size (optional)")
    parser.add_argument("-f", "--format", type=str, help="CSV or JSON (optional)")
    parser.add_argument(
        "-u",
        "--url",
        type=str,
        default=URL,
        help="Service URL (default: {})".format(URL),
    )
    return parser


def build_payload(args):
    """
    Turn parsed arguments into the service request body.
    """
    data = {
        "symbols": args.symbols.split(","),
        "interval": args.interval,
    }
    for key in ("exchange", "country", "type", "outputsize", "format"):
        value = getattr(args, key)
        if value is not None:
            data[key] = value
    return data


def main(argv=None):
    """
    Post the request to the service and print the response.
    """
    args = build_parser().parse_args(argv)

    # Check if API key is set
    api_key = os.getenv("QT_TDREQUEST_API_KEY")
    if api_key is None:
        print("Error: QT_TDREQUEST_API_KEY environment variable is not set.")
        return 1

    headers = {"Content-Type": "application/json", "x-api-key": api_key}
    response = requests.post(args.url, json=build_payload(args), headers=headers)

    print(response.status_code)
    try:
        print(response.json())
    except ValueError:
        print(response.text)

    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
