"""
Start the Community OS API under uvicorn.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn community_os.fastapi_app:app --host 0.0.0.0 --port 5001 --reload

APP_ENV selects the configuration (development, testing, production);
PERSISTENCE_BACKEND=memory runs without a database.
"""

import os

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from community_os.config.settings import get_config


def main():
    env = os.getenv("APP_ENV", "development")
    config = get_config(env)
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 5001))
    reload = env == "development"

    print(f"Starting Community OS API ({env}, {config.PERSISTENCE_BACKEND} persistence)")
    print(f"API docs available at http://{host}:{port}/docs")

    uvicorn.run(
        "community_os.fastapi_app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=config.LOG_LEVEL.lower() if reload else "warning",
    )


if __name__ == "__main__":
    main()
