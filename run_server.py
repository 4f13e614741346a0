#!/usr/bin/env python3
"""Run the item manager web server."""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from dotenv import load_dotenv
load_dotenv()

from item_manager.config import get_settings


def main():
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print(f"""
    Item Manager Server
      URL:        http://{settings.SERVER_HOST}:{settings.SERVER_PORT}
      API Docs:   http://{settings.SERVER_HOST}:{settings.SERVER_PORT}/docs
      Database:   {settings.DATABASE_PATH}
      Hot Reload: {settings.SERVER_RELOAD}
    """)

    uvicorn.run(
        "server.app:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.SERVER_RELOAD,
    )


if __name__ == "__main__":
    main()
