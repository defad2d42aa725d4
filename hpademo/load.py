# -*- coding: utf-8 -
#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

import time

# seconds of CPU burned per request
LOAD_DURATION = 0.5


def simulate_load(duration=LOAD_DURATION):
    """\
    Hold the calling worker busy until ``duration`` seconds have passed
    on the monotonic clock.

    The loop only samples the clock: it never sleeps, yields or does any
    I/O, so the time is spent on CPU and shows up in utilization metrics.
    A zero or negative duration returns right away.
    """
    deadline = time.monotonic() + max(duration, 0)
    while time.monotonic() < deadline:
        pass
