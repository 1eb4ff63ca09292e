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
microRNA entities from the miRBase alias table.

Creates one sequence reference per miRBase accession and one microRNA
entity per alias name, before any miRTarBase row is mapped.  A name used
by several accessions becomes a generic entity whose members are the
accession-specific variants.  Entities never picked up by a regulation
are left dangling; :func:`~._prune.prune` removes them.
"""

from __future__ import annotations

__all__ = ['populate_aliases']

import logging

from ._graph import Kind
from ._identity import resolve
from ._mapper import mirbase_db
from ._organism import organism

_log = logging.getLogger(__name__)


def populate_aliases(session) -> int:
    """
    Add the microRNAs of the session's alias table to its graph.

    Returns:
        Number of microRNA entities created.
    """

    graph = session.graph
    tables = session.tables
    n_created = 0

    for accession, names in tables.accession_names.items():

        ref, created = resolve(
            graph,
            Kind.REGULATOR_SEQUENCE_REFERENCE,
            'mirbase',
            accession,
        )

        if created:
            ref.display_name = accession
            ref.standard_name = accession
            ref.add_name(accession)
            session.xref(ref, 'unification', mirbase_db(accession), accession)

            code = next(filter(None, map(tables.code_from_mirna, names)), None)

            if code:
                graph.add_edge(ref, 'organism', organism(session, code=code))

        for name in names:

            ref.add_name(name)
            rna, created = resolve(graph, Kind.REGULATOR_SEQUENCE, name)

            if not created:

                if ref.id in rna.targets('entity_reference'):
                    continue

                generic = rna
                rna, created = resolve(
                    graph,
                    Kind.REGULATOR_SEQUENCE,
                    name,
                    accession,
                )
                graph.add_edge(generic, 'member_physical_entity', rna)

            if created:
                rna.display_name = name
                rna.standard_name = name
                rna.add_name(name)
                rna.add_name(accession)
                graph.add_edge(rna, 'entity_reference', ref)
                n_created += 1

    _log.info(
        'Created %d microRNA entities from %d miRBase accessions.',
        n_created,
        len(tables.accession_names),
    )

    return n_created
