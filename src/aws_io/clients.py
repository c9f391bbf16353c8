"""boto3 client construction and process-wide client management."""
import logging
import threading
from typing import TYPE_CHECKING, Any, Dict, Optional

import boto3
from botocore.config import Config

from aws_io.settings import Settings, get_settings

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
    from mypy_boto3_sqs import SQSClient

logger = logging.getLogger(__name__)

# Transport settings are fixed for the life of the process.
TCP_KEEPALIVE = True
MAX_POOL_CONNECTIONS = 50


def transport_config() -> Config:
    """botocore config shared by every client: pooled, keep-alive connections."""
    return Config(
        tcp_keepalive=TCP_KEEPALIVE,
        max_pool_connections=MAX_POOL_CONNECTIONS,
    )


def create_client(service_name: str, settings: Optional[Settings] = None) -> Any:
    """Create a boto3 client for ``service_name`` from settings.

    Credentials and endpoint are only passed when configured, otherwise the
    normal boto3 credential chain applies.
    """
    settings = settings or get_settings()

    client_kwargs: Dict[str, Any] = {
        'region_name': settings.aws_region,
        'config': transport_config(),
    }
    if settings.aws_access_key_id:
        client_kwargs['aws_access_key_id'] = settings.aws_access_key_id
    if settings.aws_secret_access_key:
        client_kwargs['aws_secret_access_key'] = settings.aws_secret_access_key
    if settings.aws_endpoint_url:
        client_kwargs['endpoint_url'] = settings.aws_endpoint_url

    try:
        client = boto3.client(service_name, **client_kwargs)
        logger.debug(f"Created {service_name} client")
        return client
    except Exception as e:
        logger.error(f"Error creating {service_name} client: {str(e)}")
        raise


class AWSClientManager:
    """Singleton holding one long-lived client per AWS service.

    botocore clients are thread safe and pool their connections, so every
    caller in the process shares the same instance.
    Creation is guarded by a lock so concurrent first use still yields
    exactly one client per service.
    """
    _instance = None
    _clients: Dict[str, Any] = {}
    _lock = threading.RLock()

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                instance = super(AWSClientManager, cls).__new__(cls)
                instance._initialize()
                cls._instance = instance
            return cls._instance

    def _initialize(self):
        """Initialize the client manager with settings."""
        self.settings = get_settings()

        logger.info("Initializing AWSClientManager")
        logger.info(f"  Region: {self.settings.aws_region}")
        logger.info(f"  Endpoint: {self.settings.aws_endpoint_url}")

    def get_client(self, service_name: str) -> Any:
        """Get or create an AWS service client."""
        with self._lock:
            if service_name not in self._clients:
                self._clients[service_name] = create_client(service_name, self.settings)
            return self._clients[service_name]

    def clear_clients(self):
        """Clear all cached clients."""
        with self._lock:
            self._clients.clear()
        logger.debug("Cleared all AWS clients")

    @classmethod
    def reset(cls):
        """Forget the singleton so the next use re-reads settings."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance.clear_clients()
            cls._instance = None


def get_s3_client() -> "S3Client":
    """Get the S3 client."""
    return AWSClientManager().get_client('s3')


def get_sqs_client() -> "SQSClient":
    """Get the SQS client."""
    return AWSClientManager().get_client('sqs')
