"""
Main FastAPI application entry point.

Run with:
    uvicorn hexaparking.main:app
"""

import logging

from hexaparking.application import create_app
from hexaparking.config import get_settings
from hexaparking.core.logging import intercept_standard_logging
from hexaparking.core.uvicorn_filters import HealthCheckFilter

# Route uvicorn and fastapi logs through loguru
intercept_standard_logging()
logging.getLogger("uvicorn.access").addFilter(HealthCheckFilter())

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hexaparking.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning",
    )
