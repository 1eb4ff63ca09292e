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
Per-organism pathway groups.

Not biological pathways: one aggregate per microRNA species that collects
every regulation of that species together with all process-like entities
reachable from it (the regulated production processes).
"""

from __future__ import annotations

__all__ = ['assign', 'reachable']

import logging
from collections import deque

from ._graph import Graph, Kind, Node
from ._identity import resolve
from ._organism import organism

_log = logging.getLogger(__name__)


def reachable(graph: Graph, start: Node) -> list[Node]:
    """
    All nodes reachable from *start* along outgoing edges.

    Breadth-first worklist traversal; a node enters the worklist at most
    once, so cycles (e.g. microRNA member links) terminate.

    Returns:
        Reached nodes in visiting order, *start* excluded.
    """

    visited = {start.id}
    queue = deque([start])
    result = []

    while queue:

        for neighbour in graph.neighbours(queue.popleft()):

            if neighbour.id in visited:
                continue

            visited.add(neighbour.id)
            queue.append(neighbour)
            result.append(neighbour)

    return result


def assign(session, regulation: Node, organism_name: str) -> Node:
    """
    Add a regulation and everything process-like it reaches to the
    pathway group of *organism_name*.

    Args:
        session: The mapping session.
        regulation: Regulation node, always added as a component.
        organism_name: Species name, e.g. ``'Homo sapiens'``.

    Returns:
        The pathway node.
    """

    org = organism(session, name=organism_name)
    pathway, created = resolve(session.graph, Kind.PATHWAY, *org.key)

    if created:
        pathway.display_name = organism_name
        pathway.standard_name = organism_name
        pathway.add_name(organism_name)
        session.graph.add_edge(pathway, 'organism', org)
        _log.debug('New pathway group for %s.', organism_name)

    for node in reachable(session.graph, regulation):
        if node.is_process and node is not pathway:
            session.graph.add_edge(pathway, 'pathway_component', node)

    session.graph.add_edge(pathway, 'pathway_component', regulation)

    return pathway
