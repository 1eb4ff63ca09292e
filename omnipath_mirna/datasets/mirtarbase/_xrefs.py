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
Cross-reference attachment.

A reference is keyed by ``(database, external ID)`` within a scope:

- ``'global'``: one node per ``(database, ID)`` shared by every owner,
  e.g. NCBI Taxonomy references.
- ``'owner'``: one node per ``(database, ID, owner)``, so the same PubMed
  ID cited by two regulations yields two reference nodes.
"""

from __future__ import annotations

__all__ = ['SCOPES', 'XREF_TYPES', 'attach']

from ._graph import Graph, Kind, Node
from ._identity import resolve

XREF_TYPES = {
    'unification': Kind.UNIFICATION_XREF,
    'relationship': Kind.RELATIONSHIP_XREF,
    'publication': Kind.PUBLICATION_XREF,
}

SCOPES = ('global', 'owner')


def attach(
    graph: Graph,
    owner: Node,
    xref_type: str,
    db: str,
    ext_id,
    scope: str = 'owner',
) -> Node:
    """
    Find or create a cross-reference and link it to *owner*.

    Calling twice with the same arguments yields a single reference node
    and a single ``xref`` edge.

    Args:
        graph: The graph being built.
        owner: Entity the reference annotates.
        xref_type: ``'unification'``, ``'relationship'`` or
            ``'publication'``.
        db: Source database name, e.g. ``'PubMed'``.
        ext_id: Identifier within *db*.
        scope: ``'global'`` or ``'owner'``.

    Returns:
        The reference node.
    """

    if xref_type not in XREF_TYPES:
        raise ValueError(
            f'Unknown xref type: {xref_type!r}. '
            f'Available: {list(XREF_TYPES)}'
        )

    ext_id = str(ext_id)

    if scope == 'global':
        key = (db, ext_id)
    elif scope == 'owner':
        key = (db, ext_id, owner.id)
    else:
        raise ValueError(f'Unknown xref scope: {scope!r}. Available: {SCOPES}')

    xref, created = resolve(graph, XREF_TYPES[xref_type], *key)

    if created:
        xref.attrs['db'] = db
        xref.attrs['id'] = ext_id

    graph.add_edge(owner, 'xref', xref)

    return xref
