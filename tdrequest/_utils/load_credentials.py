"""
Load Twelve Data API credentials from JSON file.
"""
import json
import os
from dotenv import load_dotenv

load_dotenv()


def load_credentials(file_path, data_type):
    """
    Load Twelve Data API credentials from JSON file.

    Falls back to the TWELVEDATA_API_KEY environment variable when the file
    does not exist.
    """

    if data_type == "twelvedata_api":
        if file_path is not None and os.path.exists(file_path):
            with open(file_path, "r", encoding="utf-8") as file:
                creds = json.load(file)
            td_creds = creds["twelvedata_api"]
            return td_creds["API_KEY"]

        api_key = os.getenv("TWELVEDATA_API_KEY")
        if not api_key:
            raise ValueError(
                f"No Twelve Data API key in {file_path} or TWELVEDATA_API_KEY"
            )
        return api_key

    else:
        raise ValueError(f"Invalid data type: {data_type}")
