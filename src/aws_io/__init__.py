"""
Async wrappers around boto3 for S3 object fetch/upload and SQS publishing.

Every call is counted and timed through Telemetry; failures are logged once
and re-raised unchanged.
"""
from aws_io.logging_utils import configure_logging, serialize_error
from aws_io.operations import fetch_from_s3, publish_to_sqs, upload_to_s3
from aws_io.queue import QueuePublisher
from aws_io.storage import ObjectStore
from aws_io.telemetry import Telemetry

__all__ = [
    "ObjectStore",
    "QueuePublisher",
    "Telemetry",
    "configure_logging",
    "fetch_from_s3",
    "publish_to_sqs",
    "serialize_error",
    "upload_to_s3",
]
