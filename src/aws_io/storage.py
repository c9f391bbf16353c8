"""Async S3 object fetch and upload with telemetry and error logging."""
import asyncio
import logging
from typing import TYPE_CHECKING, Optional, Union

from aws_io.logging_utils import serialize_error
from aws_io.settings import get_settings
from aws_io.telemetry import Telemetry

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client

logger = logging.getLogger(__name__)

FETCH_OPERATION = "fetch"
UPLOAD_OPERATION = "upload"
UPLOAD_CONTENT_TYPE = "application/json"
DEFAULT_CHUNK_SIZE = 64 * 1024


class ObjectStore:
    """Handles S3 object reads and writes.

    The boto3 client is synchronous, so every blocking call (the request and
    each chunk read of a response body) runs in a worker thread and the
    coroutine suspends on it.
    """

    def __init__(
        self,
        s3_client: "S3Client",
        telemetry: Optional[Telemetry] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self._client = s3_client
        self._telemetry = telemetry or Telemetry(namespace=get_settings().metrics_namespace)
        self._chunk_size = chunk_size

    async def fetch(self, bucket: str, key: str) -> bytes:
        """
        Download an object and return its full content.

        :param bucket: The name of the S3 bucket.
        :param key: path to the object in the S3 bucket.
        :return: The object body, chunks joined in the order they arrived.
        """
        try:
            self._telemetry.increase_count(FETCH_OPERATION)

            response = await self._telemetry.track_duration(
                FETCH_OPERATION,
                asyncio.to_thread(self._client.get_object, Bucket=bucket, Key=key),
            )
            return await self._read_body(response["Body"])
        except Exception as e:
            logger.error(f"Cannot download file {key} from S3 bucket {bucket}: {serialize_error(e)}")
            raise

    async def upload(self, bucket: str, key: str, content: Union[bytes, str]) -> None:
        """
        Upload an object, always declared as JSON.

        :param bucket: The name of the S3 bucket.
        :param key: path to the object in the S3 bucket.
        :param content: The body to store.
        """
        try:
            self._telemetry.increase_count(UPLOAD_OPERATION)

            await self._telemetry.track_duration(
                UPLOAD_OPERATION,
                asyncio.to_thread(
                    self._client.put_object,
                    Bucket=bucket,
                    Key=key,
                    Body=content,
                    ContentType=UPLOAD_CONTENT_TYPE,
                ),
            )
        except Exception as e:
            logger.error(f"Cannot upload file {key} to S3 bucket {bucket}: {serialize_error(e)}")
            raise

    async def _read_body(self, body) -> bytes:
        buffer = bytearray()
        chunks = body.iter_chunks(chunk_size=self._chunk_size)
        try:
            while True:
                chunk = await asyncio.to_thread(next, chunks, None)
                if chunk is None:
                    break
                buffer.extend(chunk)
        finally:
            body.close()
        return bytes(buffer)
