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
Mapping of miRTarBase rows to graph entities.

Each row describes one microRNA-target interaction (MTI)::

    miRNA ──controller──> regulation ──controlled──> "<gene> production."
                                                         │ product
                                                         v
                                                      protein ──> gene ref

The regulation is keyed by the miRTarBase ID.  Rows repeating an ID only
add evidence (publications and comments) to the existing regulation.
Genes are keyed by their Entrez Gene ID, falling back to the symbol when
the ID cell is blank or unusable.
"""

from __future__ import annotations

__all__ = [
    'gene_key',
    'map_row',
    'mirbase_db',
    'production_process',
    'regulator_reference',
    'regulator_sequence',
]

import logging
import math
import re

from ._errors import RecoverableFieldError, RecoverableParseError
from ._graph import Kind, Node
from ._identity import lookup, resolve
from ._organism import organism
from ._pathway import assign
from ._record import MtiRecord

_log = logging.getLogger(__name__)

_REQUIRED = ('mirna', 'mirna_species', 'target_gene', 'target_species')
_INTEGRAL = re.compile(r'^\+?(\d+)(\.0*)?$')

NCBI_GENE_DB = 'NCBI Gene'
HGNC_SYMBOL_DB = 'HGNC Symbol'
MIRTARBASE_DB = 'miRTarBase'
PUBMED_DB = 'PubMed'
CONTROL_TYPE = 'INHIBITION'
TEMPLATE_DIRECTION = 'FORWARD'


def mirbase_db(accession: str) -> str:
    """miRBase database name for a precursor or mature accession."""

    return (
        'miRBase mature sequence'
        if accession.startswith('MIMAT') else
        'miRBase Sequence'
    )


def _text(value) -> str | None:
    """Stripped text of a cell, ``None`` for empty cells."""

    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None

    value = str(value).strip()

    return value or None


def _positive_int(field: str, value) -> int | None:
    """
    Parse a numeric cell.

    Returns:
        The integer, or ``None`` for an empty cell.

    Raises:
        RecoverableParseError: Non-empty cell that is not a positive
            integer.
    """

    if isinstance(value, bool):
        raise RecoverableParseError(field, value)

    if isinstance(value, int):
        number = value

    elif isinstance(value, float):
        if math.isnan(value):
            return None
        if not value.is_integer():
            raise RecoverableParseError(field, value)
        number = int(value)

    else:
        text = _text(value)

        if text is None:
            return None

        match = _INTEGRAL.match(text)

        if not match:
            raise RecoverableParseError(field, value)

        number = int(match.group(1))

    if number <= 0:
        raise RecoverableParseError(field, value)

    return number


def gene_key(symbol: str, gene_id: int | None) -> tuple[str, str]:
    """Business key of a target gene."""

    return ('ncbigene', str(gene_id)) if gene_id else ('symbol', symbol)


def production_process(
    session,
    symbol: str,
    gene_id: int | None,
    species: str,
) -> Node:
    """
    Find or create the production process of a target gene.

    Creates the gene reference, the protein and the process as needed.
    Attributes and cross-references are set on creation only.
    """

    graph = session.graph
    key = gene_key(symbol, gene_id)

    ref, created = resolve(graph, Kind.TARGET_PRODUCT_REFERENCE, *key)

    if created:
        ref.display_name = symbol
        ref.standard_name = symbol
        ref.add_name(symbol)
        graph.add_edge(ref, 'organism', organism(session, name=species))

        if gene_id:
            session.xref(ref, 'relationship', NCBI_GENE_DB, gene_id)

        session.xref(ref, 'relationship', HGNC_SYMBOL_DB, symbol)

    protein, created = resolve(graph, Kind.TARGET_PRODUCT, *key)

    if created:
        protein.display_name = symbol
        protein.standard_name = symbol
        protein.add_name(symbol)
        graph.add_edge(protein, 'entity_reference', ref)

    process, created = resolve(graph, Kind.PRODUCTION_PROCESS, *key)

    if created:
        name = f'{symbol} production.'
        process.display_name = name
        process.standard_name = name
        process.add_name(name)
        process.attrs['template_direction'] = TEMPLATE_DIRECTION
        graph.add_edge(process, 'product', protein)

    return process


def regulator_reference(session, lc_name: str, species: str) -> Node:
    """
    Find or create the sequence reference of a microRNA.

    The reference is keyed by the first miRBase accession of the name, so
    aliases of one sequence share it; names missing from the alias table
    are keyed by themselves.
    """

    tables = session.tables
    accessions = tables.accessions(lc_name)
    key = ('mirbase', accessions[0]) if accessions else ('name', lc_name)

    ref, created = resolve(session.graph, Kind.REGULATOR_SEQUENCE_REFERENCE, *key)

    if created:
        ref.display_name = lc_name
        ref.standard_name = lc_name

        code = tables.code_from_mirna(lc_name)
        org = (
            organism(session, code=code)
            if code else
            organism(session, name=species)
        )
        session.graph.add_edge(ref, 'organism', org)

        for accession in accessions:
            session.xref(ref, 'relationship', mirbase_db(accession), accession)

    ref.add_name(lc_name)

    return ref


def regulator_sequence(session, name: str, species: str) -> Node:
    """Find or create the microRNA entity of a name (case-insensitive)."""

    lc_name = name.lower()
    rna, created = resolve(session.graph, Kind.REGULATOR_SEQUENCE, lc_name)

    if created:
        rna.display_name = name
        rna.standard_name = name
        rna.add_name(name)
        ref = regulator_reference(session, lc_name, species)
        session.graph.add_edge(rna, 'entity_reference', ref)

    return rna


def _regulation(
    session,
    key: tuple[str, ...],
    record_id: str,
    mirna: str,
    species: str,
    gene: str,
    gene_id: int | None,
    target_species: str,
) -> Node:

    graph = session.graph
    regulation = lookup(graph, Kind.REGULATION, *key)

    if regulation is not None:
        return regulation

    process = production_process(session, gene, gene_id, target_species)
    rna = regulator_sequence(session, mirna, species)

    regulation, _ = resolve(graph, Kind.REGULATION, *key)
    regulation.attrs['control_type'] = CONTROL_TYPE
    regulation.attrs['signature'] = (mirna.lower(), gene)
    graph.add_edge(regulation, 'controlled', process)
    graph.add_edge(regulation, 'controller', rna)

    regulation.add_name(
        f'{mirna} ({species}) regulates expression of '
        f'{gene} in {target_species}'
    )
    regulation.display_name = f'{mirna} regulates {gene}'
    regulation.standard_name = record_id

    # synthetic row keys have no miRTarBase entry
    if len(key) == 1:
        session.xref(regulation, 'relationship', MIRTARBASE_DB, record_id)

    return regulation


def map_row(session, record: MtiRecord, row: int | None = None) -> Node:
    """
    Map one MTI row into the graph.

    Args:
        session: The mapping session.
        record: The row.
        row: Row number, used in warnings and for synthetic IDs.

    Returns:
        The regulation the row describes or adds evidence to.

    Raises:
        RecoverableFieldError: A required text field is empty.  Nothing
            has been added to the graph in this case.
        ValueError: Synthetic IDs are enabled, the record has no ID and
            *row* is not given.
    """

    record_id = _text(record.mirtarbase_id)
    fields = {name: _text(getattr(record, name)) for name in _REQUIRED}
    missing = [name for name, value in fields.items() if value is None]

    if record_id is None and not session.options.get('synthetic_ids'):
        missing.insert(0, 'mirtarbase_id')

    if missing:
        raise RecoverableFieldError(tuple(missing), row=row, record_id=record_id)

    if record_id is None:

        if row is None:
            raise ValueError(
                'A row number is required to key records without a '
                'miRTarBase ID.'
            )

        key = ('row', str(row))
        record_id = f'row_{row}'
        session.warn(
            'synthetic_id',
            f'no miRTarBase ID, using {record_id}',
            row=row,
        )
    else:
        key = (record_id,)

    mirna = fields['mirna']
    species = fields['mirna_species']
    gene = fields['target_gene']
    target_species = fields['target_species']

    try:
        gene_id = _positive_int('target_gene_id', record.target_gene_id)
    except RecoverableParseError as e:
        session.warn(
            'parse_error',
            f'{e}; keying gene {gene} by symbol',
            row=row,
            record_id=record_id,
        )
        gene_id = None

    regulation = _regulation(
        session,
        key,
        record_id,
        mirna,
        species,
        gene,
        gene_id,
        target_species,
    )

    if regulation.attrs.get('signature') != (mirna.lower(), gene):
        session.warn(
            'inconsistent_record',
            f'{mirna} -> {gene} differs from the first row of this ID '
            f'{regulation.attrs.get("signature")}',
            row=row,
            record_id=record_id,
        )

    try:
        pmid = _positive_int('references', record.references)
    except RecoverableParseError as e:
        session.warn('parse_error', f'{e}; skipping', row=row, record_id=record_id)
        pmid = None

    if pmid:
        session.xref(regulation, 'publication', PUBMED_DB, pmid)

    regulation.add_comment(_text(record.experiments))
    regulation.add_comment(_text(record.support_type))

    if session.pathway_per_organism:
        assign(session, regulation, species)

    return regulation
