#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

import io
from wsgiref.util import setup_testing_defaults

HOST = "127.0.0.1"


def make_environ(method="GET", path="/", body=b""):
    environ = {
        "REQUEST_METHOD": method,
        "PATH_INFO": path,
        "CONTENT_LENGTH": str(len(body)),
        "wsgi.input": io.BytesIO(body),
    }
    setup_testing_defaults(environ)
    return environ


class StartResponse:

    def __init__(self):
        self.calls = []

    def __call__(self, status, headers, exc_info=None):
        self.calls.append((status, headers, exc_info))

    @property
    def status(self):
        return self.calls[-1][0]

    @property
    def headers(self):
        return dict(self.calls[-1][1])


def call_app(app, method="GET", path="/", body=b""):
    """\
    Run ``app`` once and return ``(start_response, body)``.
    """
    start_response = StartResponse()
    result = app(make_environ(method, path, body), start_response)
    try:
        payload = b"".join(result)
    finally:
        if hasattr(result, "close"):
            result.close()
    return start_response, payload
