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
Conversion of tabular input into :class:`~._record.MtiRecord` rows.

The miRTarBase workbook itself is read elsewhere (e.g. by
``pandas.read_excel``); this module only maps the resulting columns.
"""

from __future__ import annotations

__all__ = ['MIRTARBASE_COLUMNS', 'as_record', 'records', 'records_from_frame']

from collections.abc import Generator, Iterable, Mapping

import pandas as pd

from ._errors import FatalInputError
from ._record import MtiRecord

MIRTARBASE_COLUMNS = {
    'miRTarBase ID': 'mirtarbase_id',
    'miRNA': 'mirna',
    'Species (miRNA)': 'mirna_species',
    'Target Gene': 'target_gene',
    'Target Gene (Entrez Gene ID)': 'target_gene_id',
    'Species (Target Gene)': 'target_species',
    'Experiments': 'experiments',
    'Support Type': 'support_type',
    'References (PMID)': 'references',
}

_MIN_COLUMNS = 6
_REQUIRED_POSITIONAL = 4


def _cell(value):

    return None if pd.isna(value) else value


def records_from_frame(df: pd.DataFrame) -> Generator[MtiRecord, None, None]:
    """
    Yield one record per DataFrame row.

    Columns are matched by :class:`MtiRecord` field names, then by the
    miRTarBase header names, and otherwise taken by position.  Missing
    optional columns are treated as empty.

    Raises:
        FatalInputError: Fewer than six columns to take by position.
    """

    fields = MtiRecord._fields
    renamed = df.rename(columns=MIRTARBASE_COLUMNS)

    if set(fields[:_MIN_COLUMNS]) <= set(renamed.columns):
        table = renamed.reindex(columns=list(fields))
    elif df.shape[1] >= _MIN_COLUMNS:
        table = df.iloc[:, :len(fields)]
    else:
        raise FatalInputError(
            f'MTI table has {df.shape[1]} columns, '
            f'at least {_MIN_COLUMNS} are required.'
        )

    for values in table.itertuples(index=False, name=None):
        yield MtiRecord(*(_cell(v) for v in values))


def as_record(value) -> MtiRecord:
    """
    Record from a record, a mapping of field names or a sequence.

    Absent keys of a mapping are empty cells, so the row mapper reports
    them as missing fields.
    """

    if isinstance(value, MtiRecord):
        return value

    try:
        if isinstance(value, Mapping):
            fields = dict.fromkeys(MtiRecord._fields[:_REQUIRED_POSITIONAL])
            fields.update(
                (MIRTARBASE_COLUMNS.get(k, k), v)
                for k, v in value.items()
            )

            return MtiRecord(**fields)

        return MtiRecord(*value)

    except TypeError as e:
        raise FatalInputError(f'Not an MTI record: {value!r} ({e})') from e


def records(source: pd.DataFrame | Iterable) -> Iterable[MtiRecord]:
    """Records of a DataFrame or an iterable of record-like rows."""

    if isinstance(source, pd.DataFrame):
        return records_from_frame(source)

    return (as_record(row) for row in source)
