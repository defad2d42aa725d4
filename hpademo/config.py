# -*- coding: utf-8 -
#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

# Only logging is configurable. The bind address, the worker model and
# the load duration are fixed in hpademo.app and hpademo.load.

import argparse

from gunicorn import config
from gunicorn.errors import ConfigError

from hpademo import __version__

LOGGING_SETTINGS = (
    "loglevel",
    "errorlog",
    "accesslog",
    "access_log_format",
    "capture_output",
)

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def validate_loglevel(val):
    val = config.validate_string(val)
    if val is None or val.lower() not in LOG_LEVELS:
        raise ConfigError("Invalid log level: %r, expected one of %s"
                          % (val, ", ".join(LOG_LEVELS)))
    return val.lower()


class Config(config.Config):
    """\
    gunicorn configuration restricted to its logging settings.
    """

    def __init__(self, prog=None):
        super().__init__(prog=prog or "hpademo")
        self.settings = {k: s for k, s in config.make_settings().items()
                         if k in LOGGING_SETTINGS}

    def set(self, name, value):
        if name == "loglevel":
            value = validate_loglevel(value)
        super().set(name, value)

    def parser(self):
        parser = argparse.ArgumentParser(
            prog=self.prog,
            description="CPU load generating HTTP server listening on "
                        "0.0.0.0:8080.")
        parser.add_argument("-v", "--version",
                            action="version", default=argparse.SUPPRESS,
                            version="%(prog)s (version " + __version__ + ")\n",
                            help="show program's version number and exit")

        keys = sorted(self.settings, key=self.settings.__getitem__)
        for k in keys:
            self.settings[k].add_option(parser)
        return parser

    def parse_args(self, argv=None):
        """\
        Parse ``argv`` (``sys.argv[1:]`` when ``None``) and apply every
        option given on the command line.
        """
        args = self.parser().parse_args(argv)
        for k, v in vars(args).items():
            if v is None:
                continue
            self.set(k.lower(), v)
        return args

    def options(self):
        return {k: s.get() for k, s in self.settings.items()}
