#!/usr/bin/env python

#
# This file is part of the `omnipath_mirna` Python module
#
# Copyright 2026
# Heidelberg University Hospital
#
# File author(s): OmniPath Team (omnipathdb@gmail.com)
#
# Distributed under the BSD-3-Clause license
# See the file `LICENSE` or read a copy at
# https://opensource.org/license/bsd-3-clause
#

"""Data files of the miRTarBase graph builder."""

from pathlib import Path


DATA_DIR = Path(__file__).parent


def data_path(filename: str) -> Path:
    """
    Path to a file shipped in the miRTarBase data directory.

    Args:
        filename: Name of the data file.

    Returns:
        Path to the data file.
    """

    return DATA_DIR / filename
