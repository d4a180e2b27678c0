"""
main.py — Server launcher and entry point.

Run this file to start the room distribution API:

    python main.py

The interactive API docs are served at http://127.0.0.1:8000/docs and the
Streamlit dashboard can be started separately:

    streamlit run dashboard/app.py

This file does NOT contain application logic. See app.py for the FastAPI
application and service wiring.
"""

from __future__ import annotations

import uvicorn

from backend.utils.config import get_settings


def main() -> None:
    """Start the room distribution API server."""
    settings = get_settings()
    print("=" * 60)
    print(f"  {settings.app_name} v{settings.app_version}")
    print("=" * 60)
    print(f"  Server   : http://{settings.api_host}:{settings.api_port}")
    print(f"  API docs : http://{settings.api_host}:{settings.api_port}/docs")
    print(f"  Capacity : {settings.room_capacity} people per room")
    print("=" * 60)
    print("  Press CTRL+C to stop\n")

    # Blocks until CTRL+C
    uvicorn.run(
        "app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
