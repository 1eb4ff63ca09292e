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

"""Mapping session: the state threaded through one conversion run."""

from __future__ import annotations

__all__ = ['MappingSession']

import logging
from dataclasses import dataclass, field

from ._config import config
from ._graph import Graph, Node
from ._record import MappingWarning
from ._tables import ReferenceTables, empty_tables
from ._xrefs import attach

_log = logging.getLogger(__name__)


@dataclass
class MappingSession:
    """
    Owns the graph under construction, the reference tables, the
    configuration and the warnings collected so far.

    One session serves exactly one single-threaded conversion pass.
    """

    graph: Graph
    tables: ReferenceTables = field(default_factory=empty_tables)
    options: dict = field(default_factory=config)
    warnings: list[MappingWarning] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        tables: ReferenceTables | None = None,
        **kwargs,
    ) -> MappingSession:
        """Session with an empty graph; *kwargs* override the config."""

        options = config(**kwargs)
        tables = empty_tables() if tables is None else tables

        return cls(
            graph=Graph(xml_base=options.get('xml_base') or ''),
            tables=tables,
            options=options,
            warnings=list(tables.issues),
        )

    @property
    def pathway_per_organism(self) -> bool:

        return bool(self.options.get('pathway_per_organism'))

    def xref_scope(self, xref_type: str) -> str:

        return self.options.get('xref_scope', {}).get(xref_type, 'owner')

    def xref(self, owner: Node, xref_type: str, db: str, ext_id) -> Node:
        """Attach a cross-reference in the configured scope of its type."""

        return attach(
            self.graph,
            owner,
            xref_type,
            db,
            ext_id,
            scope=self.xref_scope(xref_type),
        )

    def warn(
        self,
        category: str,
        message: str,
        row: int | None = None,
        record_id: str | None = None,
    ) -> None:
        """Log a recoverable problem and keep it for the run's outcome."""

        _log.warning('Row %s (%s): %s', row, record_id or 'no ID', message)
        self.warnings.append(MappingWarning(row, category, message, record_id))
