"""
Main entry point for the FastAPI application.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn message_api.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5001 --reload
"""

import os
import sys
import io

# Set UTF-8 encoding for stdout/stderr to handle Unicode characters on Windows
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(
        sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )
    sys.stderr = io.TextIOWrapper(
        sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )

os.environ["PYTHONIOENCODING"] = "utf-8"

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from message_api.config.settings import get_config

if __name__ == "__main__":
    settings = get_config()
    debug = settings.DEBUG

    print(f"Starting FastAPI application in {settings.APP_ENV} mode...")
    print(f"Server running on http://{settings.HOST}:{settings.PORT}")
    print(f"API docs available at http://{settings.HOST}:{settings.PORT}/docs")

    uvicorn.run(
        "message_api.fastapi_app:create_fastapi_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
