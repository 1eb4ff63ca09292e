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

"""Input and diagnostic records for the miRTarBase graph builder."""

from __future__ import annotations

__all__ = ['MappingWarning', 'MtiRecord']

from typing import Any, NamedTuple


class MtiRecord(NamedTuple):
    """
    One row of the miRTarBase MTI table.

    Fields hold raw cell values as delivered by the table reader: strings,
    numbers, or ``None`` for empty cells.  Parsing and normalization happen
    in the row mapper.  Several rows may share a ``mirtarbase_id``; such rows
    differ only in their evidence columns.
    """

    mirtarbase_id: Any
    """miRTarBase interaction ID (e.g. ``'MIRT000001'``)."""

    mirna: Any
    """microRNA name (e.g. ``'hsa-miR-21-5p'``)."""

    mirna_species: Any
    """Species of the microRNA (e.g. ``'Homo sapiens'``)."""

    target_gene: Any
    """Target gene symbol."""

    target_gene_id: Any = None
    """Target gene Entrez Gene ID, may be blank or unparsable."""

    target_species: Any = None
    """Species of the target gene."""

    experiments: Any = None
    """Free text list of experimental methods."""

    support_type: Any = None
    """Support type (e.g. ``'Functional MTI'``)."""

    references: Any = None
    """PubMed ID of the supporting publication."""


class MappingWarning(NamedTuple):
    """A recoverable problem encountered during a conversion run."""

    row: int | None
    """Row number in the input (``None`` for reference table problems)."""

    category: str
    """Short problem class, e.g. ``'missing_field'`` or ``'parse_error'``."""

    message: str
    """Human readable description."""

    record_id: str | None = None
    """miRTarBase ID of the affected record, if known."""
