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

"""Removal of dangling entities after mapping."""

from __future__ import annotations

__all__ = ['DEFAULT_PRUNE_KINDS', 'prune']

import logging
from collections.abc import Iterable

from ._graph import Graph, Kind

_log = logging.getLogger(__name__)

DEFAULT_PRUNE_KINDS = (
    Kind.REGULATOR_SEQUENCE,
    Kind.REGULATOR_SEQUENCE_REFERENCE,
    Kind.UNIFICATION_XREF,
)


def prune(
    graph: Graph,
    kinds: Iterable[Kind | str] = DEFAULT_PRUNE_KINDS,
) -> int:
    """
    Remove entities of *kinds* that no other entity refers to.

    Removing a node drops its outgoing edges, which may leave further
    nodes dangling (a reference whose only owner was removed); passes
    repeat until nothing changes.

    Args:
        graph: The graph to clean up, modified in place.
        kinds: Entity kinds eligible for removal, as :class:`Kind` members
            or their values.

    Returns:
        Number of removed nodes.
    """

    kinds = frozenset(Kind(k) for k in kinds)
    removed = 0

    while True:

        dangling = [
            node
            for node in graph
            if node.kind in kinds and not graph.in_degree(node)
        ]

        if not dangling:
            break

        for node in dangling:
            graph.remove_node(node)

        removed += len(dangling)

    _log.info('Removed %d dangling entities.', removed)

    return removed
