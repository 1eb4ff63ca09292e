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
Deterministic identifiers and find-or-create for graph entities.

A local identifier is a kind-specific prefix followed by the business key
parts, each percent-quoted and joined by ``:``::

    local_id(Kind.TARGET_PRODUCT_REFERENCE, 'ncbigene', '7157')
    # 'ref_ncbigene:7157'

    local_id(Kind.REGULATOR_SEQUENCE, 'hsa-mir-21')
    # 'rna_hsa-mir-21'

The prefixes form a prefix-free set and quoting removes ``:`` from the
parts, so two different ``(kind, key)`` pairs never yield the same
identifier.  Identifiers are case- and whitespace-sensitive: callers
normalize keys (e.g. lower-case microRNA names) before resolving.
"""

from __future__ import annotations

__all__ = ['PREFIXES', 'local_id', 'lookup', 'resolve']

import logging
import urllib.parse

from ._errors import IdentityCollisionError
from ._graph import Graph, Kind, Node

_log = logging.getLogger(__name__)

PREFIXES = {
    Kind.REGULATOR_SEQUENCE: 'rna_',
    Kind.REGULATOR_SEQUENCE_REFERENCE: 'rnaref_',
    Kind.TARGET_PRODUCT: 'protein_',
    Kind.TARGET_PRODUCT_REFERENCE: 'ref_',
    Kind.PRODUCTION_PROCESS: 'template_',
    Kind.REGULATION: 'control_',
    Kind.ORGANISM: 'org_',
    Kind.UNIFICATION_XREF: 'uxref_',
    Kind.RELATIONSHIP_XREF: 'rxref_',
    Kind.PUBLICATION_XREF: 'pubxref_',
    Kind.PATHWAY: 'pathway_',
}


def _normalize_key(key: tuple) -> tuple[str, ...]:

    if not key:
        raise ValueError('Business key must have at least one part.')

    return tuple(str(part) for part in key)


def local_id(kind: Kind, *key) -> str:
    """
    Local identifier of the entity of *kind* with business key *key*.

    Args:
        kind: Entity kind.
        key: One or more business key parts.

    Returns:
        Prefixed, quoted identifier without the namespace.
    """

    parts = _normalize_key(key)

    return PREFIXES[kind] + ':'.join(
        urllib.parse.quote(part, safe='') for part in parts
    )


def _check(node: Node, kind: Kind, key: tuple[str, ...]) -> Node:

    if node.kind is not kind or node.key != key:
        _log.error(
            'Identity collision on %s: existing %s %r, requested %s %r.',
            node.id,
            node.kind.value,
            node.key,
            kind.value,
            key,
        )
        raise IdentityCollisionError(
            f'{node.id} is bound to {node.kind.value} {node.key!r}, '
            f'not {kind.value} {key!r}'
        )

    return node


def lookup(graph: Graph, kind: Kind, *key) -> Node | None:
    """Existing entity of *kind* for *key*, or ``None``."""

    parts = _normalize_key(key)
    node = graph.find_node(graph.uri(local_id(kind, *parts)))

    return None if node is None else _check(node, kind, parts)


def resolve(graph: Graph, kind: Kind, *key) -> tuple[Node, bool]:
    """
    Find or create the entity of *kind* for *key*.

    Args:
        graph: The graph being built.
        kind: Entity kind.
        key: Normalized business key parts.

    Returns:
        Tuple of the node and a flag telling whether it was created by
        this call.  Attributes of a new node are left for the caller to set.

    Raises:
        IdentityCollisionError: The identifier is already bound to a
            different kind or key.
    """

    parts = _normalize_key(key)
    node_id = graph.uri(local_id(kind, *parts))
    node = graph.find_node(node_id)

    if node is not None:
        return _check(node, kind, parts), False

    return graph.create_node(kind, node_id, parts), True
