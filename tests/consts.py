"""Constants shared by the test suite."""
TEST_BUCKET_NAME = "test-bucket"
TEST_QUEUE_NAME = "test-queue"
TEST_REGION = "us-east-1"
