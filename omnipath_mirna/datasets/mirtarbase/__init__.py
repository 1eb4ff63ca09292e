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

"""
miRTarBase microRNA-target regulation graph.

Maps the miRTarBase MTI table into an object graph of microRNAs, their
target gene production processes and the inhibitory regulations joining
them, cross-referenced to miRBase, NCBI Gene, HGNC, PubMed and NCBI
Taxonomy.

Usage::

    import pandas as pd
    from omnipath_mirna.datasets.mirtarbase import convert

    mti = pd.read_excel('miRTarBase_MTI.xlsx')
    result = convert(
        mti,
        aliases='aliases.txt',
        pathway_per_organism=True,
    )
    result.summary()
    result.graph.counts()
    result.warnings_frame()
"""

__all__ = [
    'ConversionResult',
    'Graph',
    'Kind',
    'MappingSession',
    'MtiRecord',
    'convert',
    'load_tables',
    'map_row',
    'prune',
    'records_from_frame',
]

from ._build import ConversionResult, convert
from ._graph import Graph, Kind
from ._input import records_from_frame
from ._mapper import map_row
from ._prune import prune
from ._record import MtiRecord
from ._session import MappingSession
from ._tables import load as load_tables
