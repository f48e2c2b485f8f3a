"""
Logging configuration for the Retail Inventory API
Console output in development, structured JSON in production
"""
import logging
import logging.config
import os
import sys
import time
import uuid
from typing import Any, Dict

import structlog

from inventory_api.core.config import settings


def setup_logging() -> None:
    """Configure stdlib logging and structlog for the application"""
    production = settings.ENVIRONMENT == "production"

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d %(funcName)s"
            },
            "console": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if production else "console",
                "stream": sys.stdout
            },
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": settings.LOG_LEVEL,
                "propagate": False
            },
            "uvicorn": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False
            },
            "sqlalchemy.engine": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False
            },
            "inventory_api": {
                "handlers": ["console"],
                "level": settings.LOG_LEVEL,
                "propagate": False
            }
        }
    }

    if production:
        os.makedirs("logs", exist_ok=True)
        logging_config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": "logs/app.log",
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "json"
        }
        logging_config["loggers"][""]["handlers"].append("file")
        logging_config["loggers"]["inventory_api"]["handlers"].append("file")

    logging.config.dictConfig(logging_config)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_service_context,
            structlog.processors.JSONRenderer() if production
            else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def add_service_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Stamp every entry with the service name and version"""
    event_dict["service"] = "retail-inventory-api"
    event_dict["version"] = settings.APP_VERSION
    return event_dict


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance"""
    return structlog.get_logger(name or "inventory_api")


logger = get_logger(__name__)


class LoggingMiddleware:
    """ASGI middleware for request/response logging"""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_logger = get_logger("inventory_api.request").bind(
            request_id=str(uuid.uuid4()),
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b"").decode()
        )

        start_time = time.time()
        request_logger.info("Request started")

        response_status = 500

        async def send_wrapper(message):
            nonlocal response_status
            if message["type"] == "http.response.start":
                response_status = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            request_logger.error("Request failed", error=str(e), exc_info=True)
            raise
        finally:
            duration = time.time() - start_time
            request_logger.info(
                "Request completed",
                status_code=response_status,
                duration_ms=round(duration * 1000, 2)
            )


def log_business_event(event_type: str, product_id: int = None, **kwargs):
    """Log inventory events (product created, restocked, deleted, ...)"""
    business_logger = get_logger("inventory_api.business")
    business_logger.info(
        "Business event",
        event_type=event_type,
        product_id=product_id,
        **kwargs
    )
