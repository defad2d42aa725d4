# -*- coding: utf-8 -
#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

import logging
import socket
import time

from hpademo.load import LOAD_DURATION, simulate_load

log = logging.getLogger(__name__)

GREETING = "Hello from HPA demo! Host: "


def compose_response(hostname=None):
    """\
    Build the ``(status, headers, body)`` triple returned for every
    request. The host name is looked up on each call.
    """
    if hostname is None:
        hostname = socket.gethostname()
    body = ("%s%s\n" % (GREETING, hostname)).encode("utf-8")
    headers = [("Content-Length", str(len(body)))]
    return "200 OK", headers, body


class LoadHandler:
    """\
    WSGI application answering any method on any path.

    The load runs before the response is composed, so a worker serving
    a request is held for the whole duration.
    """

    def __init__(self, duration=LOAD_DURATION):
        self.duration = duration

    def __call__(self, environ, start_response):
        start = time.monotonic()
        simulate_load(self.duration)
        status, headers, body = compose_response()
        log.debug("%s %s handled in %.3fs",
                  environ.get("REQUEST_METHOD", "-"),
                  environ.get("PATH_INFO", "-"),
                  time.monotonic() - start)
        start_response(status, headers)
        return [body]


application = LoadHandler()
