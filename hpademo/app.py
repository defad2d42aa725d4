# -*- coding: utf-8 -
#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

import sys

import gunicorn.app.base

from hpademo.config import Config
from hpademo.glogging import Logger
from hpademo.handler import application

# A single sync worker serves one request at a time: while the load
# runs every other connection waits in the listen backlog.
BIND = "0.0.0.0:8080"
WORKERS = 1
WORKER_CLASS = "sync"


def on_starting(server):
    server.log.info("CPU Stress App starting...")


class HPADemoApplication(gunicorn.app.base.BaseApplication):
    """\
    Run a WSGI application on an embedded gunicorn arbiter with the
    fixed serving settings. ``options`` is applied last and may only name
    gunicorn settings; the command line never reaches it with anything
    but logging options.
    """

    def __init__(self, app=None, options=None):
        self.options = options or {}
        self.application = app or application
        super().__init__()

    def load_config(self):
        settings = {
            "bind": BIND,
            "workers": WORKERS,
            "worker_class": WORKER_CLASS,
            "logger_class": Logger,
            "on_starting": on_starting,
        }
        settings.update(self.options)
        for key, value in settings.items():
            if value is None or key.lower() not in self.cfg.settings:
                continue
            self.cfg.set(key.lower(), value)

    def load(self):
        return self.application


def run(argv=None):
    """\
    The ``hpademo`` command line runner.
    """
    cfg = Config()
    try:
        cfg.parse_args(argv)
    except Exception as e:
        sys.stderr.write("\nError: %s\n" % str(e))
        sys.stderr.flush()
        sys.exit(1)
    HPADemoApplication(options=cfg.options()).run()
