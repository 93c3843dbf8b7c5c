"""Fake transport objects and provider payload builders shared by the tests."""

import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class RecordingPost:
    """Stand-in for `requests.post` that records calls and replays a response."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def __call__(self, url, headers=None, json=None, timeout=None):  # noqa: A002
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


def chat_payload(content):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


def image_payload(url):
    return {"data": [{"url": url}]}
