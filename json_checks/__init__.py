# json_checks - fetch, deserialize and assert JSON API responses in tests
from json_checks.api_client import APIClient
from json_checks.output_sink import LoggerOutput, OutputSink, RecordingOutput, get_logger
from json_checks.response_checks import (
    deserialize_and_check_response,
    get_json_result,
    post_for_json_result,
    write_output,
)

__all__ = [
    "APIClient",
    "LoggerOutput",
    "OutputSink",
    "RecordingOutput",
    "deserialize_and_check_response",
    "get_json_result",
    "get_logger",
    "post_for_json_result",
    "write_output",
]
