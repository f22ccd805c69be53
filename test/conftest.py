import boto3
import pytest
from botocore.stub import Stubber

from helpers import FakeCognito
from pulumi_cognito import RecordingEventLogger, ResourceServerManager


@pytest.fixture
def events():
    return RecordingEventLogger()


@pytest.fixture
def manager(events):
    return ResourceServerManager(events)


@pytest.fixture
def cognito():
    client = boto3.client(
        "cognito-idp",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def fake_cognito():
    return FakeCognito()
