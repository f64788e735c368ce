# json_checks/api_client.py - minimal HTTP client wrapper around requests
import os

import requests

from json_checks import response_checks

# ------------ Config (env-overridable) ------------
BASE_URL = os.environ.get("BASE_URL", "")
_timeout_env = os.environ.get("TIMEOUT", "").strip()
TIMEOUT = float(_timeout_env) if _timeout_env else None  # None -> no timeout


class APIClient:
    def __init__(self, base_url=None, timeout=TIMEOUT):
        self.base_url = (BASE_URL if base_url is None else base_url).rstrip('/')
        self.session = requests.Session()
        self.timeout = timeout

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.session.close()

    def _url(self, endpoint):
        if endpoint.startswith(("http://", "https://")) or not self.base_url:
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def post(self, endpoint, json_payload=None, data=None, headers=None, json=None):
        url = self._url(endpoint)
        if json is not None:
            json_payload = json
        if json_payload is not None:
            return self.session.post(url, json=json_payload, headers=headers, timeout=self.timeout)
        else:
            return self.session.post(url, data=data, headers=headers, timeout=self.timeout)

    def get(self, endpoint, params=None, headers=None):
        url = self._url(endpoint)
        return self.session.get(url, params=params, headers=headers, timeout=self.timeout)

    def get_json_result(self, endpoint, expected_status, output, model=dict):
        return response_checks.get_json_result(self, endpoint, expected_status, output, model)

    def post_for_json_result(self, endpoint, content, expected_status, output, model=dict):
        return response_checks.post_for_json_result(self, endpoint, content, expected_status, output, model)
