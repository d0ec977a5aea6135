"""
Resolve file paths used by tdrequest.
"""

import os
from dotenv import load_dotenv

load_dotenv()

PATH_VARS = {
    "creds": ("TDREQUEST_CREDS_PATH", "creds.json"),
    "log": ("TDREQUEST_LOG_PATH", "tdrequest.log"),
    "env": ("TDREQUEST_ENV_PATH", ".env"),
}


def get_path(path_type):
    """
    Get the path for a given file type, from the environment or a default
    under the working directory.
    """
    if path_type not in PATH_VARS:
        raise ValueError(f"Invalid path type: {path_type}")

    env_var, default = PATH_VARS[path_type]
    return os.getenv(env_var) or os.path.join(os.getcwd(), default)
