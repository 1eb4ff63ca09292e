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
In-memory object graph for the miRTarBase conversion.

Nodes are identified by absolute identifiers (``xml_base`` followed by a
local identifier).  Edges are labelled, directed and unique per
``(source, relation, target)``.  The graph keeps an index of incoming edges
so that dangling nodes can be found without a full scan.

Entity kinds carry a capability tag: kinds in :data:`PROCESS_KINDS` are
process-like (reactions, regulations, pathways) and are eligible for
pathway membership.
"""

from __future__ import annotations

__all__ = [
    'Graph',
    'Kind',
    'Node',
    'PROCESS_KINDS',
]

import enum
import logging
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

import pandas as pd

from ._errors import IdentityCollisionError

_log = logging.getLogger(__name__)


class Kind(enum.Enum):
    """Entity kinds of the output graph."""

    REGULATOR_SEQUENCE = 'regulator_sequence'
    REGULATOR_SEQUENCE_REFERENCE = 'regulator_sequence_reference'
    TARGET_PRODUCT = 'target_product'
    TARGET_PRODUCT_REFERENCE = 'target_product_reference'
    PRODUCTION_PROCESS = 'production_process'
    REGULATION = 'regulation'
    ORGANISM = 'organism'
    UNIFICATION_XREF = 'unification_xref'
    RELATIONSHIP_XREF = 'relationship_xref'
    PUBLICATION_XREF = 'publication_xref'
    PATHWAY = 'pathway'


PROCESS_KINDS = frozenset({
    Kind.PRODUCTION_PROCESS,
    Kind.REGULATION,
    Kind.PATHWAY,
})


@dataclass(eq=False)
class Node:
    """A single entity of the graph."""

    kind: Kind
    id: str
    key: tuple[str, ...] = ()
    display_name: str | None = None
    standard_name: str | None = None
    names: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    attrs: dict = field(default_factory=dict)
    # relation to target ids, a dict used as an insertion ordered set
    edges: dict[str, dict[str, None]] = field(default_factory=dict)

    @property
    def is_process(self) -> bool:

        return self.kind in PROCESS_KINDS

    def add_name(self, name: str | None) -> None:

        if name and name not in self.names:
            self.names.append(name)

    def add_comment(self, comment: str | None) -> None:

        if comment and comment not in self.comments:
            self.comments.append(comment)

    def targets(self, relation: str) -> list[str]:
        """Identifiers linked from this node by *relation*."""

        return list(self.edges.get(relation, ()))

    def __repr__(self) -> str:

        return f'<{self.kind.value} {self.id}>'


class Graph:
    """
    Object graph store.

    Args:
        xml_base:
            Namespace prepended to local identifiers to form the absolute
            node identifiers.
    """

    def __init__(self, xml_base: str = ''):

        self.xml_base = xml_base
        self._nodes: dict[str, Node] = {}
        self._incoming: dict[str, dict[tuple[str, str], None]] = {}

    def uri(self, local_id: str) -> str:
        """Absolute identifier for a local identifier."""

        return f'{self.xml_base}{local_id}'

    def create_node(
        self,
        kind: Kind,
        node_id: str,
        key: tuple[str, ...] = (),
    ) -> Node:
        """
        Create and register a new node.

        Raises:
            IdentityCollisionError: If *node_id* is already taken.
        """

        if node_id in self._nodes:
            raise IdentityCollisionError(
                f'Identifier already in use: {node_id} '
                f'(existing {self._nodes[node_id].kind.value}, '
                f'requested {kind.value})'
            )

        node = Node(kind=kind, id=node_id, key=tuple(key))
        self._nodes[node_id] = node
        self._incoming[node_id] = {}

        return node

    def find_node(self, node_id: str) -> Node | None:

        return self._nodes.get(node_id)

    def add_edge(self, source: Node, relation: str, target: Node) -> bool:
        """
        Link *source* to *target* by *relation*.

        Returns:
            ``True`` if the edge is new, ``False`` if it already existed.
        """

        for node in (source, target):
            if self._nodes.get(node.id) is not node:
                raise KeyError(f'Node not in graph: {node.id}')

        linked = source.edges.setdefault(relation, {})

        if target.id in linked:
            return False

        linked[target.id] = None
        self._incoming[target.id][source.id, relation] = None

        return True

    def incoming(self, node: Node) -> list[tuple[Node, str]]:
        """Nodes pointing to *node*, with the relation of each edge."""

        return [
            (self._nodes[source_id], relation)
            for source_id, relation in self._incoming.get(node.id, ())
        ]

    def in_degree(self, node: Node) -> int:

        return len(self._incoming.get(node.id, ()))

    def neighbours(self, node: Node) -> Iterator[Node]:
        """Targets of all outgoing edges of *node*."""

        for linked in node.edges.values():
            for target_id in linked:
                yield self._nodes[target_id]

    def remove_node(self, node: Node) -> None:
        """Remove *node* together with all its incoming and outgoing edges."""

        for relation, linked in node.edges.items():
            for target_id in linked:
                del self._incoming[target_id][node.id, relation]

        for source_id, relation in self._incoming.pop(node.id, ()):
            del self._nodes[source_id].edges[relation][node.id]

        node.edges.clear()
        del self._nodes[node.id]
        _log.debug('Removed %r.', node)

    def nodes_of_kind(self, kind: Kind) -> list[Node]:

        return [n for n in self._nodes.values() if n.kind is kind]

    def edges(self) -> Iterator[tuple[str, str, str]]:
        """All edges as ``(source id, relation, target id)`` triples."""

        for node in self._nodes.values():
            for relation, linked in node.edges.items():
                for target_id in linked:
                    yield node.id, relation, target_id

    def counts(self) -> pd.Series:
        """Number of nodes per entity kind."""

        counter = Counter(node.kind.value for node in self._nodes.values())

        return pd.Series(
            [counter.get(kind.value, 0) for kind in Kind],
            index=[kind.value for kind in Kind],
            dtype=int,
        )

    def __contains__(self, node_id: str) -> bool:

        return node_id in self._nodes

    def __iter__(self) -> Iterator[Node]:

        return iter(list(self._nodes.values()))

    def __len__(self) -> int:

        return len(self._nodes)
