# -*- coding: utf-8 -
#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

import logging

from gunicorn import glogging

APP_LOGGER = "hpademo"


class Logger(glogging.Logger):
    """\
    gunicorn logger that also routes the ``hpademo`` loggers.

    Application messages go to the same handlers, with the same format
    and level, as gunicorn's error log.
    """

    def __init__(self, cfg):
        self.app_log = logging.getLogger(APP_LOGGER)
        super().__init__(cfg)

    def setup(self, cfg):
        super().setup(cfg)
        self.app_log.handlers = list(self.error_log.handlers)
        self.app_log.setLevel(self.error_log.level)
        self.app_log.propagate = False
