#!/usr/bin/env python

"""Shared test fixtures for omnipath_mirna tests."""

import io

import pytest

from omnipath_mirna.datasets.mirtarbase._session import MappingSession
from omnipath_mirna.datasets.mirtarbase._tables import load


ALIASES = (
    '# miRBase aliases\n'
    'MI0000060\thsa-let-7a-1;let-7a-1;\n'
    'MIMAT0000062\thsa-let-7a-5p;hsa-let-7a;\n'
    'MIMAT0000076\thsa-miR-21-5p;hsa-miR-21;\n'
    'MI0000077\thsa-mir-21;\n'
    'MIMAT0000121\tmmu-miR-21a-5p;mmu-miR-21;\n'
)

ORGANISMS = (
    '#organism\t#division\t#name\t#tree\t#NCBI-taxid\n'
    'hsa\tHSA\tHomo sapiens\tMetazoa;Chordata;Mammalia;\t9606\n'
    'mmu\tMMU\tMus musculus\tMetazoa;Chordata;Mammalia;\t10090\n'
    'ebv\tEBV\tEpstein Barr Virus\tViruses;\t10376\n'
)


@pytest.fixture
def aliases_stream():
    """miRBase alias table as a text stream."""

    return io.StringIO(ALIASES)


@pytest.fixture
def organisms_stream():
    """miRBase organism table as a text stream."""

    return io.StringIO(ORGANISMS)


@pytest.fixture
def tables():
    """Reference tables loaded from the sample alias and organism tables."""

    return load(io.StringIO(ALIASES), io.StringIO(ORGANISMS))


@pytest.fixture
def session(tables):
    """Mapping session with an empty graph and the sample tables."""

    return MappingSession.new(tables=tables)
