#!/usr/bin/env python3
"""Run the Solitaire Web API server."""

import logging
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv


def main():
    """Run the server."""
    # Load .env file if it exists
    env_file = Path(__file__).parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        print(f"Loaded environment from {env_file}")

    log_level = os.environ.get("SOLITAIRE_LOG_LEVEL", "INFO").lower()
    logging.basicConfig(level=log_level.upper())

    uvicorn.run(
        "web.api:app",
        host=os.environ.get("SOLITAIRE_HOST", "0.0.0.0"),
        port=int(os.environ.get("SOLITAIRE_PORT", "8000")),
        reload=True,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
