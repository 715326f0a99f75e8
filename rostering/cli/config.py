# rostering/cli/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

# This cli/config.py file is at <project>/rostering/cli/config.py
project_root = Path(__file__).parent.parent.parent.resolve()

# Load environment variables from .env file, overriding system environment variables
load_dotenv(dotenv_path=project_root / '.env', override=True)

# API configuration for CLI client communication
ROSTERING_CLI_API_BASE_URL = os.getenv("ROSTERING_CLI_API_BASE_URL", "http://127.0.0.1:8000")

# Prefix the server mounts its REST routes under
ROSTERING_CLI_API_PREFIX = os.getenv("API_PREFIX", "/rest")
