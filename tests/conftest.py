import boto3
import pytest
from moto import mock_aws

from aws_io.clients import AWSClientManager, create_client
from aws_io.operations import reset_defaults
from aws_io.settings import get_settings
from aws_io.telemetry import Telemetry
from tests.consts import TEST_BUCKET_NAME, TEST_QUEUE_NAME, TEST_REGION


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)
    monkeypatch.delenv("AWS_PROFILE", raising=False)

    get_settings.cache_clear()
    AWSClientManager.reset()
    reset_defaults()
    yield
    get_settings.cache_clear()
    AWSClientManager.reset()
    reset_defaults()


@pytest.fixture
def mocked_aws():
    """In-process S3 and SQS with a test bucket and queue already created."""
    with mock_aws():
        s3_client = boto3.client("s3", region_name=TEST_REGION)
        s3_client.create_bucket(Bucket=TEST_BUCKET_NAME)

        sqs_client = boto3.client("sqs", region_name=TEST_REGION)
        sqs_client.create_queue(QueueName=TEST_QUEUE_NAME)

        yield


@pytest.fixture
def s3_client(mocked_aws):
    return create_client("s3")


@pytest.fixture
def sqs_client(mocked_aws):
    return create_client("sqs")


@pytest.fixture
def queue_url(sqs_client):
    return sqs_client.get_queue_url(QueueName=TEST_QUEUE_NAME)["QueueUrl"]


@pytest.fixture
def telemetry():
    return Telemetry()
