"""
Logging setup and error logging helpers.

Errors are written to the console and to an ``error.log`` file. Request
context is reduced to method and URL so headers and bodies (which may
carry credentials) never reach the logs.

Example:
    from common.utils.logger import configure_logging, log_error

    configure_logging("INFO", "logs")

    try:
        ...
    except Exception as e:
        log_error(logger, e, "Error in register", request)
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ERROR_LOG_FILENAME = "error.log"


def configure_logging(level_name: str = "INFO", log_dir: Optional[str] = "logs") -> None:
    """
    Configure root logging for the application.

    Args:
        level_name: Root log level name (e.g. "INFO", "DEBUG")
        log_dir: Directory for the error log file. None disables file logging.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()

    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root_logger.setLevel(level)

    if not log_dir:
        return

    error_log_path = Path(log_dir) / ERROR_LOG_FILENAME
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == error_log_path.absolute():
            return

    try:
        error_log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(error_log_path, encoding="utf-8")
    except OSError as e:
        root_logger.warning(f"Failed to open error log file {error_log_path}: {e}")
        return

    file_handler.setLevel(logging.ERROR)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)


def request_context(request: Optional[Request]) -> Dict[str, Any]:
    """Reduce a request to the fields that are safe to log."""
    if request is None:
        return {}
    return {"method": request.method, "url": str(request.url)}


def log_error(
    logger: logging.Logger,
    error: BaseException,
    context_message: Optional[str] = None,
    request: Optional[Request] = None,
) -> None:
    """
    Log an error with traceback and minimal request context.

    Args:
        logger: Logger to write to
        error: The exception being reported
        context_message: Prefix describing where the error happened
        request: Optional request, only method and URL are recorded
    """
    message = f"{context_message}: {error}" if context_message else str(error)
    context = request_context(request)
    if context:
        message = f"{message} [{context['method']} {context['url']}]"

    logger.error(message, exc_info=(type(error), error, error.__traceback__))
