#!/usr/bin/env python
# This file is part of the gf256 project
# https://github.com/mbarkhau/gf256
#
# Copyright (c) 2019 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""
__main__ module for gf256.

Enables use as module: $ python -m gf256
"""


if __name__ == '__main__':
    from . import cli

    cli.cli()
