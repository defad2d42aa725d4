# -*- coding: utf-8 -
#
# This file is part of hpademo released under the MIT license.
# See the NOTICE for more information.

from hpademo.app import run

if __name__ == "__main__":
    run()
