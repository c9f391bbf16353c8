"""Module-level S3/SQS operations backed by process-wide clients.

The first call builds an ObjectStore and a QueuePublisher on top of the
cached clients from AWSClientManager; both share one Telemetry instance
registered in the default prometheus registry, so the metrics show up in
``generate_latest()`` and ``start_http_server()``.
"""
import logging
from typing import Any, Mapping, Optional, Union

from prometheus_client import REGISTRY

from aws_io.clients import get_s3_client, get_sqs_client
from aws_io.queue import QueuePublisher
from aws_io.settings import get_settings
from aws_io.storage import ObjectStore
from aws_io.telemetry import Telemetry

logger = logging.getLogger(__name__)

_telemetry: Optional[Telemetry] = None
_object_store: Optional[ObjectStore] = None
_queue_publisher: Optional[QueuePublisher] = None


def get_telemetry() -> Telemetry:
    """Telemetry shared by the default store and publisher."""
    global _telemetry
    if _telemetry is None:
        _telemetry = Telemetry(
            registry=REGISTRY,
            namespace=get_settings().metrics_namespace,
        )
    return _telemetry


def get_object_store() -> ObjectStore:
    global _object_store
    if _object_store is None:
        _object_store = ObjectStore(get_s3_client(), get_telemetry())
        logger.info("Default ObjectStore initialized")
    return _object_store


def get_queue_publisher() -> QueuePublisher:
    global _queue_publisher
    if _queue_publisher is None:
        _queue_publisher = QueuePublisher(get_sqs_client(), get_telemetry())
        logger.info("Default QueuePublisher initialized")
    return _queue_publisher


def reset_defaults() -> None:
    """Drop the default store, publisher and telemetry."""
    global _telemetry, _object_store, _queue_publisher
    if _telemetry is not None:
        _telemetry.unregister()
    _telemetry = None
    _object_store = None
    _queue_publisher = None


async def fetch_from_s3(bucket: str, key: str) -> bytes:
    return await get_object_store().fetch(bucket, key)


async def upload_to_s3(bucket: str, key: str, content: Union[bytes, str]) -> None:
    await get_object_store().upload(bucket, key, content)


async def publish_to_sqs(
    queue: str,
    data: str,
    additional_attributes: Optional[Mapping[str, Any]] = None,
) -> None:
    await get_queue_publisher().publish(queue, data, additional_attributes)
