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

"""Organism entities, keyed by NCBI Taxonomy ID where known."""

from __future__ import annotations

__all__ = ['organism', 'organism_key']

import logging

from ._graph import Kind, Node
from ._identity import resolve

_log = logging.getLogger(__name__)

TAXONOMY_DB = 'Taxonomy'


def organism_key(
    tables,
    name: str | None = None,
    code: str | None = None,
) -> tuple[tuple[str, str], str, str | None]:
    """
    Business key, display name and taxonomy ID of an organism.

    The species code (given, or looked up from *name* in the organism
    table) resolves to a taxonomy ID.  Without one the lower-cased name is
    the key.

    Returns:
        Tuple of the key, the display name and the taxonomy ID (or
        ``None``).
    """

    if code is None:
        code = tables.code_for_name(name)

    taxon = tables.organism_taxa.get(code) if code else None
    display = (tables.organism_names.get(code) if code else None) or name

    if not display:
        raise ValueError('Organism needs a name or a known species code.')

    key = ('taxon', taxon) if taxon else ('name', display.lower())

    return key, display, taxon


def organism(session, name: str | None = None, code: str | None = None) -> Node:
    """
    Find or create the organism of a species name or code.

    A new organism gets a taxonomy cross-reference when its taxonomy ID is
    known.
    """

    key, display, taxon = organism_key(session.tables, name=name, code=code)
    node, created = resolve(session.graph, Kind.ORGANISM, *key)

    if created:
        node.display_name = display
        node.standard_name = display
        node.add_name(display)

        if taxon:
            node.attrs['taxon'] = taxon
            session.xref(node, 'unification', TAXONOMY_DB, taxon)

        _log.debug('New organism %s (%s).', display, taxon or 'no taxon')

    elif name:
        node.add_name(name)

    return node
