import pytest

from json_checks.api_client import APIClient
from json_checks.output_sink import RecordingOutput

BASE_URL = "http://api.test"


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def client():
    with APIClient(BASE_URL) as c:
        yield c
