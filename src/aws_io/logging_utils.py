"""Logging helpers shared by the storage and queue wrappers."""
import logging
from typing import Optional

from botocore.exceptions import ClientError

from aws_io.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for processes that use aws_io.

    Args:
        level: Logging level name. Defaults to ``Settings.log_level``.
    """
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
    )


def serialize_error(error: BaseException) -> str:
    """Render an exception as a single loggable line.

    botocore ``ClientError`` carries the interesting parts in its response
    dict, so the error code, HTTP status and request id are appended when
    present.

    Args:
        error: Any exception raised by the SDK or the transport

    Returns:
        A string like ``ClientError: An error occurred (NoSuchKey) ... [code=NoSuchKey, status=404]``
    """
    message = f"{type(error).__name__}: {error}"

    if isinstance(error, ClientError):
        response = error.response or {}
        details = []
        code = response.get("Error", {}).get("Code")
        if code:
            details.append(f"code={code}")
        metadata = response.get("ResponseMetadata", {})
        status = metadata.get("HTTPStatusCode")
        if status:
            details.append(f"status={status}")
        request_id = metadata.get("RequestId")
        if request_id:
            details.append(f"request_id={request_id}")
        if details:
            message = f"{message} [{', '.join(details)}]"

    return message
