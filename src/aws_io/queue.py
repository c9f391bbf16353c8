"""Async SQS publishing with telemetry and error logging."""
import asyncio
import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from aws_io.logging_utils import serialize_error
from aws_io.settings import get_settings
from aws_io.telemetry import Telemetry

if TYPE_CHECKING:
    from mypy_boto3_sqs import SQSClient

logger = logging.getLogger(__name__)

PUBLISH_OPERATION = "publish"


class QueuePublisher:
    """Sends messages to SQS queues."""

    def __init__(self, sqs_client: "SQSClient", telemetry: Optional[Telemetry] = None):
        self._client = sqs_client
        self._telemetry = telemetry or Telemetry(namespace=get_settings().metrics_namespace)

    async def publish(
        self,
        queue_url: str,
        data: str,
        additional_attributes: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Send one message.

        :param queue_url: URL of the target queue.
        :param data: The message body.
        :param additional_attributes: Extra SendMessage parameters such as
            ``MessageAttributes`` or ``DelaySeconds``, passed through as-is.
            Keys given here win over ``QueueUrl`` / ``MessageBody``.
        """
        try:
            self._telemetry.increase_count(PUBLISH_OPERATION)

            request = self.build_request(queue_url, data, additional_attributes)
            await self._telemetry.track_duration(
                PUBLISH_OPERATION,
                asyncio.to_thread(self._client.send_message, **request),
            )
        except Exception as e:
            logger.error(f"Cannot publish a message to {queue_url}: {serialize_error(e)}")
            raise

    @staticmethod
    def build_request(
        queue_url: str,
        data: str,
        additional_attributes: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """SendMessage parameters for ``data`` merged with the caller's extras."""
        return {"QueueUrl": queue_url, "MessageBody": data, **(additional_attributes or {})}
