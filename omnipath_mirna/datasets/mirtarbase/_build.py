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
miRTarBase graph builder.

Main entry point: loads the miRBase reference tables, maps every
miRTarBase row into one object graph and runs the optional
post-processing steps.

Steps:

1. Reference tables (aliases, organisms), loaded once.
2. microRNA entities from the alias table (``alias_entities``).
3. Rows, in input order; each fully mapped before the next, including
   its pathway assignment (``pathway_per_organism``).
4. Dangling entity removal (``remove_dangling``).
"""

from __future__ import annotations

__all__ = ['ConversionResult', 'convert']

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

import pandas as pd
from tqdm import tqdm

from ._config import config
from ._errors import RecoverableFieldError
from ._graph import Graph, Kind
from ._input import records as as_records
from ._mapper import map_row
from ._mirbase import populate_aliases
from ._prune import prune
from ._record import MappingWarning
from ._session import MappingSession
from ._tables import ReferenceTables, Source, load

if TYPE_CHECKING:
    from pathlib import Path

_log = logging.getLogger(__name__)


class ConversionResult(NamedTuple):
    """Outcome of one conversion run."""

    graph: Graph
    """The object graph."""

    n_records: int
    """Number of input rows seen."""

    n_mapped: int
    """Number of rows mapped into the graph."""

    warnings: tuple[MappingWarning, ...] = ()
    """Recoverable problems, in the order they occurred."""

    n_pruned: int = 0
    """Number of dangling entities removed."""

    def summary(self) -> str:

        return (
            f'converted {self.n_mapped} of {self.n_records} records, '
            f'{len(self.warnings)} warnings'
        )

    def warnings_frame(self) -> pd.DataFrame:
        """Warnings as a DataFrame, one row per warning."""

        return pd.DataFrame(self.warnings, columns=MappingWarning._fields)


def convert(
    rows: pd.DataFrame | Iterable,
    *args: dict | Path | str,
    aliases: Source = None,
    organisms: Source = None,
    tables: ReferenceTables | None = None,
    **kwargs,
) -> ConversionResult:
    """
    Build the regulation graph from miRTarBase rows.

    Args:
        rows:
            MTI table as a DataFrame, or an iterable of
            :class:`~._record.MtiRecord`, sequences or mappings.
        *args:
            Configuration overrides as dicts or YAML file paths.
        aliases:
            miRBase ``aliases.txt`` path or stream; defaults to the
            ``aliases`` config key.
        organisms:
            miRBase ``organisms.txt`` path or stream; defaults to the
            ``organisms`` config key.
        tables:
            Already loaded reference tables; *aliases* and *organisms*
            are ignored if given.
        **kwargs:
            Top-level config keys, e.g.::

                convert(df, pathway_per_organism=True)
                convert(df, remove_dangling=True, alias_entities=True)
                convert(df, publication='global')

    Returns:
        The graph together with row counts and warnings.

    Raises:
        FatalInputError: Input or reference tables can not be read.
        IdentityCollisionError: Two business keys produced the same
            identifier.
    """

    cfg = config(*args, **kwargs)

    if tables is None:
        tables = load(
            aliases if aliases is not None else cfg.get('aliases'),
            organisms if organisms is not None else cfg.get('organisms'),
            strict=bool(cfg.get('strict_tables')),
        )

    session = MappingSession(
        graph=Graph(xml_base=cfg.get('xml_base') or ''),
        tables=tables,
        options=cfg,
        warnings=list(tables.issues),
    )

    if cfg.get('alias_entities'):
        populate_aliases(session)

    n_records = 0
    n_mapped = 0

    for row, record in enumerate(
        tqdm(
            as_records(rows),
            desc='[miRTarBase] mapping rows',
            disable=not cfg.get('progress'),
        ),
        start=1,
    ):

        n_records += 1

        try:
            map_row(session, record, row)
            n_mapped += 1

        except RecoverableFieldError as e:
            session.warn('missing_field', str(e), row=row, record_id=e.record_id)

    n_pruned = 0

    if cfg.get('remove_dangling'):
        _log.info('[miRTarBase] Removing dangling entities...')
        n_pruned = prune(session.graph, cfg.get('prune_kinds', ()))

    graph = session.graph
    _log.info(
        '[miRTarBase] Graph contains: %d pathways; %d template reactions; '
        '%d controls; %d products.',
        len(graph.nodes_of_kind(Kind.PATHWAY)),
        len(graph.nodes_of_kind(Kind.PRODUCTION_PROCESS)),
        len(graph.nodes_of_kind(Kind.REGULATION)),
        len(graph.nodes_of_kind(Kind.TARGET_PRODUCT)),
    )

    result = ConversionResult(
        graph=graph,
        n_records=n_records,
        n_mapped=n_mapped,
        warnings=tuple(session.warnings),
        n_pruned=n_pruned,
    )
    _log.info('[miRTarBase] %s.', result.summary().capitalize())

    return result
