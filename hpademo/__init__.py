# -*- coding: utf-8 -
#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

version_info = (1, 0, 0)
__version__ = ".".join([str(v) for v in version_info])
