"""
Development server launcher.

Loads the .env file, then serves the API with uvicorn in reload mode.
Host and port can be overridden with DEV_HOST / DEV_PORT.

Usage:
    python scripts/run_dev.py
"""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv(project_root / ".env")

import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    host = os.getenv("DEV_HOST", "127.0.0.1")
    port = int(os.getenv("DEV_PORT", "8000"))

    print("=" * 60)
    print(f"{settings.PROJECT_NAME} {settings.VERSION} (development)")
    print("=" * 60)
    print(f"API:   http://{host}:{port}{settings.API_PREFIX}")
    print(f"Docs:  http://{host}:{port}/docs")
    print(f"Seed catalog on startup: {settings.SEED_ON_STARTUP}")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("app.main:app", host=host, port=port, reload=True, log_level=settings.LOG_LEVEL.lower())
