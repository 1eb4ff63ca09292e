#!/usr/bin/env python

"""Tests for omnipath_mirna.datasets.mirtarbase._mapper module."""

import math

import pytest

from omnipath_mirna.datasets.mirtarbase._errors import (
    RecoverableFieldError,
    RecoverableParseError,
)
from omnipath_mirna.datasets.mirtarbase._graph import Kind
from omnipath_mirna.datasets.mirtarbase._mapper import (
    _positive_int,
    gene_key,
    map_row,
    mirbase_db,
)
from omnipath_mirna.datasets.mirtarbase._record import MtiRecord
from omnipath_mirna.datasets.mirtarbase._session import MappingSession

BASE = 'http://mirtarbase.mbc.nctu.edu.tw/#'


def mti(**kwargs):
    """An MTI row with sensible defaults."""

    fields = {
        'mirtarbase_id': 'MIRT000002',
        'mirna': 'hsa-miR-21-5p',
        'mirna_species': 'Homo sapiens',
        'target_gene': 'PTEN',
        'target_gene_id': 5728,
        'target_species': 'Homo sapiens',
        'experiments': 'Luciferase reporter assay',
        'support_type': 'Functional MTI',
        'references': 18850008,
    }
    fields.update(kwargs)

    return MtiRecord(**fields)


def xrefs(session, node, kind=None):
    """``(db, id)`` pairs of the references attached to *node*."""

    nodes = [session.graph.find_node(i) for i in node.targets('xref')]

    return {
        (n.attrs['db'], n.attrs['id'])
        for n in nodes
        if kind is None or n.kind is kind
    }


def linked(session, node, relation):

    (target_id,) = node.targets(relation)

    return session.graph.find_node(target_id)


class TestPositiveInt:

    @pytest.mark.parametrize(
        'value, expected',
        [
            (7157, 7157),
            (7157.0, 7157),
            ('7157', 7157),
            (' 7157 ', 7157),
            ('7157.0', 7157),
            ('+12', 12),
            (None, None),
            ('', None),
            ('   ', None),
            (math.nan, None),
        ],
    )
    def test_valid(self, value, expected):
        assert _positive_int('f', value) == expected

    @pytest.mark.parametrize(
        'value',
        ['N/A', 'abc', '-3', '0', 0, -1, 1.5, '1.5', True],
    )
    def test_invalid(self, value):
        with pytest.raises(RecoverableParseError, match='not a positive integer'):
            _positive_int('target_gene_id', value)


class TestHelpers:

    def test_gene_key(self):
        assert gene_key('TP53', 7157) == ('ncbigene', '7157')
        assert gene_key('TP53', None) == ('symbol', 'TP53')

    def test_mirbase_db(self):
        assert mirbase_db('MIMAT0000076') == 'miRBase mature sequence'
        assert mirbase_db('MI0000077') == 'miRBase Sequence'


class TestMapRow:
    """A single complete row."""

    @pytest.fixture
    def regulation(self, session):

        return map_row(session, mti(), row=1)

    def test_regulation(self, regulation):
        assert regulation.id == BASE + 'control_MIRT000002'
        assert regulation.kind is Kind.REGULATION
        assert regulation.attrs['control_type'] == 'INHIBITION'
        assert regulation.display_name == 'hsa-miR-21-5p regulates PTEN'
        assert regulation.standard_name == 'MIRT000002'
        assert regulation.names == [
            'hsa-miR-21-5p (Homo sapiens) regulates expression of '
            'PTEN in Homo sapiens',
        ]

    def test_evidence(self, session, regulation):
        assert regulation.comments == [
            'Luciferase reporter assay',
            'Functional MTI',
        ]
        assert xrefs(session, regulation, Kind.PUBLICATION_XREF) == {
            ('PubMed', '18850008'),
        }
        assert xrefs(session, regulation, Kind.RELATIONSHIP_XREF) == {
            ('miRTarBase', 'MIRT000002'),
        }

    def test_production_process(self, session, regulation):
        process = linked(session, regulation, 'controlled')

        assert process.id == BASE + 'template_ncbigene:5728'
        assert process.display_name == 'PTEN production.'
        assert process.attrs['template_direction'] == 'FORWARD'

        protein = linked(session, process, 'product')
        ref = linked(session, protein, 'entity_reference')

        assert protein.id == BASE + 'protein_ncbigene:5728'
        assert ref.id == BASE + 'ref_ncbigene:5728'
        assert xrefs(session, ref) == {
            ('NCBI Gene', '5728'),
            ('HGNC Symbol', 'PTEN'),
        }

    def test_target_organism(self, session, regulation):
        process = linked(session, regulation, 'controlled')
        protein = linked(session, process, 'product')
        ref = linked(session, protein, 'entity_reference')
        org = linked(session, ref, 'organism')

        assert org.id == BASE + 'org_taxon:9606'
        assert org.display_name == 'Homo sapiens'
        assert xrefs(session, org) == {('Taxonomy', '9606')}

    def test_regulator(self, session, regulation):
        rna = linked(session, regulation, 'controller')
        ref = linked(session, rna, 'entity_reference')

        assert rna.id == BASE + 'rna_hsa-mir-21-5p'
        assert rna.display_name == 'hsa-miR-21-5p'
        assert ref.id == BASE + 'rnaref_mirbase:MIMAT0000076'
        assert xrefs(session, ref) == {
            ('miRBase mature sequence', 'MIMAT0000076'),
        }
        assert linked(session, ref, 'organism').id == BASE + 'org_taxon:9606'

    def test_no_warnings(self, session, regulation):
        assert session.warnings == []


class TestRequiredFields:

    def test_missing_mirna(self, session):
        with pytest.raises(RecoverableFieldError) as e:
            map_row(session, mti(mirna='  '), row=3)

        assert e.value.fields == ('mirna',)
        assert e.value.row == 3
        assert e.value.record_id == 'MIRT000002'
        assert len(session.graph) == 0

    def test_missing_id(self, session):
        with pytest.raises(RecoverableFieldError) as e:
            map_row(session, mti(mirtarbase_id=None, target_species=None))

        assert e.value.fields == ('mirtarbase_id', 'target_species')
        assert len(session.graph) == 0

    def test_nan_counts_as_missing(self, session):
        with pytest.raises(RecoverableFieldError):
            map_row(session, mti(target_gene=math.nan))


class TestSyntheticIds:

    def test_row_number_key(self, tables):
        session = MappingSession.new(tables=tables, synthetic_ids=True)
        regulation = map_row(session, mti(mirtarbase_id=''), row=7)

        assert regulation.id == BASE + 'control_row:7'
        assert regulation.standard_name == 'row_7'
        assert [w.category for w in session.warnings] == ['synthetic_id']
        assert session.warnings[0].row == 7

    def test_row_number_required(self, tables):
        """Records without ID and row number can not be told apart."""

        session = MappingSession.new(tables=tables, synthetic_ids=True)

        with pytest.raises(ValueError, match='row number'):
            map_row(session, mti(mirtarbase_id=None))

        assert len(session.graph) == 0

    def test_distinct_rows_distinct_regulations(self, tables):
        session = MappingSession.new(tables=tables, synthetic_ids=True)
        a = map_row(session, mti(mirtarbase_id=None), row=1)
        b = map_row(
            session,
            mti(mirtarbase_id=None, mirna='hsa-miR-1', target_gene='TP53'),
            row=2,
        )

        assert a is not b
        assert 'inconsistent_record' not in [w.category for w in session.warnings]

    def test_no_mirtarbase_xref(self, tables):
        session = MappingSession.new(tables=tables, synthetic_ids=True)
        regulation = map_row(session, mti(mirtarbase_id=None), row=2)

        assert xrefs(session, regulation, Kind.RELATIONSHIP_XREF) == set()


class TestGeneId:

    def test_unparsable_id_falls_back_to_symbol(self, session):
        regulation = map_row(session, mti(target_gene_id='N/A'), row=1)
        process = linked(session, regulation, 'controlled')

        assert process.id == BASE + 'template_symbol:PTEN'
        assert [w.category for w in session.warnings] == ['parse_error']
        assert session.warnings[0].record_id == 'MIRT000002'

        ref = linked(session, linked(session, process, 'product'),
                     'entity_reference')

        assert xrefs(session, ref) == {('HGNC Symbol', 'PTEN')}

    def test_blank_id_no_warning(self, session):
        regulation = map_row(session, mti(target_gene_id=''))

        assert linked(session, regulation, 'controlled').id == (
            BASE + 'template_symbol:PTEN'
        )
        assert session.warnings == []

    def test_string_and_number_ids_agree(self, session):
        a = map_row(session, mti(mirtarbase_id='A', target_gene_id='5728'))
        b = map_row(session, mti(mirtarbase_id='B', target_gene_id=5728.0))

        assert a.targets('controlled') == b.targets('controlled')

    def test_same_symbol_other_ids(self, session):
        a = map_row(session, mti(mirtarbase_id='A', target_gene_id=1))
        b = map_row(session, mti(mirtarbase_id='B', target_gene_id=2))

        assert a.targets('controlled') != b.targets('controlled')


class TestRepeatedIds:
    """Rows sharing a miRTarBase ID add evidence to one regulation."""

    def test_evidence_accumulates(self, session):
        a = map_row(session, mti(references=1001, experiments='qRT-PCR'))
        b = map_row(session, mti(references=1002, experiments='Western blot'))

        assert a is b
        assert len(session.graph.nodes_of_kind(Kind.REGULATION)) == 1
        assert xrefs(session, a, Kind.PUBLICATION_XREF) == {
            ('PubMed', '1001'),
            ('PubMed', '1002'),
        }
        assert a.comments == ['qRT-PCR', 'Functional MTI', 'Western blot']

    def test_identical_row_changes_nothing(self, session):
        map_row(session, mti())
        n_nodes = len(session.graph)
        edges = list(session.graph.edges())

        map_row(session, mti())

        assert len(session.graph) == n_nodes
        assert list(session.graph.edges()) == edges

    def test_inconsistent_record(self, session):
        first = map_row(session, mti(), row=1)
        again = map_row(session, mti(target_gene='TP53'), row=2)

        assert again is first
        assert len(session.graph.nodes_of_kind(Kind.PRODUCTION_PROCESS)) == 1
        assert [w.category for w in session.warnings] == ['inconsistent_record']
        assert session.warnings[0].row == 2

    def test_mirna_case_is_consistent(self, session):
        map_row(session, mti(), row=1)
        map_row(session, mti(mirna='HSA-MIR-21-5P'), row=2)

        assert session.warnings == []


class TestReferences:

    def test_bad_pmid_skipped(self, session):
        regulation = map_row(session, mti(references='pending'), row=4)

        assert xrefs(session, regulation, Kind.PUBLICATION_XREF) == set()
        assert [w.category for w in session.warnings] == ['parse_error']

    def test_missing_pmid(self, session):
        regulation = map_row(session, mti(references=None))

        assert xrefs(session, regulation, Kind.PUBLICATION_XREF) == set()
        assert session.warnings == []

    def test_pmid_shared_across_regulations(self, tables):
        """Publication references are per owner unless configured global."""

        for scope, expected in (('owner', 2), ('global', 1)):
            session = MappingSession.new(tables=tables, publication=scope)
            map_row(session, mti(mirtarbase_id='A'))
            map_row(session, mti(mirtarbase_id='B'))

            pubs = session.graph.nodes_of_kind(Kind.PUBLICATION_XREF)

            assert len(pubs) == expected


class TestRegulators:

    def test_mirna_shared_case_insensitive(self, session):
        a = map_row(session, mti(mirtarbase_id='A'))
        b = map_row(session, mti(mirtarbase_id='B', mirna='HSA-MIR-21-5P'))

        assert a.targets('controller') == b.targets('controller')

    def test_aliases_share_reference(self, session):
        """``hsa-let-7a`` and ``hsa-let-7a-5p`` are one miRBase sequence."""

        a = map_row(session, mti(mirtarbase_id='A', mirna='hsa-let-7a'))
        b = map_row(session, mti(mirtarbase_id='B', mirna='hsa-let-7a-5p'))

        rna_a = linked(session, a, 'controller')
        rna_b = linked(session, b, 'controller')

        assert rna_a is not rna_b
        assert rna_a.targets('entity_reference') == (
            rna_b.targets('entity_reference')
        )

    def test_unknown_mirna(self, session):
        regulation = map_row(
            session,
            mti(mirna='dre-miR-1', mirna_species='Danio rerio'),
        )
        ref = linked(session, linked(session, regulation, 'controller'),
                     'entity_reference')

        assert ref.id == BASE + 'rnaref_name:dre-mir-1'
        assert xrefs(session, ref) == set()
        assert linked(session, ref, 'organism').id == (
            BASE + 'org_name:danio%20rerio'
        )

    def test_organism_from_name_prefix(self, session):
        """The species code prefix wins over the species column."""

        regulation = map_row(
            session,
            mti(mirna='mmu-miR-21a-5p', mirna_species='Mouse'),
        )
        ref = linked(session, linked(session, regulation, 'controller'),
                     'entity_reference')

        assert linked(session, ref, 'organism').id == BASE + 'org_taxon:10090'
