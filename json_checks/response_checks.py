# json_checks/response_checks.py - fetch, deserialize and assert JSON API responses in tests
"""
GET/POST an endpoint, decode the JSON body into a model and check the status.

If decoding fails, the status does not match, or the result is None, the
response body is written to the output sink (pretty-printed when it is
valid JSON) and the original error is re-raised.
"""

import json
from http import HTTPStatus
from types import MappingProxyType
from typing import Union

import requests

from json_checks.json_model import from_json, to_jsonable, zero_value
from json_checks.output_sink import OutputSink, get_logger

logger = get_logger("json-checks")

# Shared, read-only after import
JSON_PRINT_OPTIONS = MappingProxyType({"indent": 2, "ensure_ascii": False})
JSON_DECODE_OPTIONS = MappingProxyType({"case_insensitive": True, "strict": False})

StatusLike = Union[HTTPStatus, int]


def _describe(status: int) -> str:
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return str(status)


def get_json_result(client, url: str, expected_status: StatusLike,
                    output: OutputSink, model=dict):
    """GET url and return the body decoded as model; see deserialize_and_check_response."""
    response = client.get(url)
    logger.debug("GET %s -> %s", url, response.status_code)
    return deserialize_and_check_response(response, expected_status, output, model)


def post_for_json_result(client, url: str, content, expected_status: StatusLike,
                         output: OutputSink, model=dict):
    """POST content as JSON to url and return the body decoded as model."""
    response = client.post(url, json=to_jsonable(content))
    logger.debug("POST %s -> %s", url, response.status_code)
    return deserialize_and_check_response(response, expected_status, output, model)


def deserialize_and_check_response(response: requests.Response, expected_status: StatusLike,
                                   output: OutputSink, model=dict):
    """
    Decode the body and check status and result.

    Empty body -> zero value of model, no parse. Order of checks: decode,
    status, not-None.
    """
    body = response.text
    try:
        result = zero_value(model) if not body else from_json(model, body, **JSON_DECODE_OPTIONS)
        if response.status_code != int(expected_status):
            raise AssertionError(
                f"expected status {_describe(int(expected_status))}, "
                f"got {_describe(response.status_code)}"
            )
        if result is None:
            raise AssertionError("expected a non-null result, got None")
        return result
    except Exception as exc:
        logger.warning("Response check failed for %s: %s", response.url, exc)
        write_output(body, output)
        raise


def write_output(body: str, output: OutputSink) -> None:
    """Write body to output, pretty-printed if it parses as JSON."""
    try:
        text = json.dumps(json.loads(body), **JSON_PRINT_OPTIONS)
    except Exception:
        text = body
    output.write_line(text)
