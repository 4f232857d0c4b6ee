"""Uvicorn access log filters."""

import logging


class HealthCheckFilter(logging.Filter):
    """
    Drop access log lines for health probes.

    Uvicorn access lines look like: '127.0.0.1:43306 - "GET /health HTTP/1.1" 200'
    """

    EXCLUDED_PATHS = {"/health", "/favicon.ico"}

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(f'"GET {path} ' in message for path in self.EXCLUDED_PATHS)
