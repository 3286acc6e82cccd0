"""Serve the API with uvicorn.

Usage:
    python -m appointment_api.run
"""
import uvicorn

from appointment_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "appointment_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
