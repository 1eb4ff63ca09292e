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
miRBase reference tables.

Two tab-separated files from miRBase are consulted while mapping rows:

``aliases.txt``
    ``accession<TAB>name;name;...;`` -- all names ever used for a miRBase
    precursor (``MI...``) or mature (``MIMAT...``) sequence.

``organisms.txt``
    ``code<TAB>division<TAB>name<TAB>tree<TAB>taxid`` -- the species code
    used as microRNA name prefix (``hsa`` in ``hsa-miR-21``), the species
    name and its NCBI Taxonomy ID.

Lines starting with ``#`` and blank lines are ignored.  Names are
lower-cased, as microRNA identities are case-insensitive.  Lines with too
few columns are skipped with a warning, or raise
:class:`~._errors.FatalInputError` in strict mode.
"""

from __future__ import annotations

__all__ = ['ReferenceTables', 'empty_tables', 'load']

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import IO, NamedTuple, Union

from .data import data_path
from ._errors import FatalInputError
from ._record import MappingWarning

_log = logging.getLogger(__name__)

_SEP = '\t'
_NAME_SEP = ';'
_ALIAS_COLUMNS = 2
_ORGANISM_COLUMNS = 5

Source = Union[str, Path, IO, None]


class ReferenceTables(NamedTuple):
    """Read-only lookups built from the miRBase tables."""

    mirna_accessions: Mapping[str, tuple[str, ...]]
    """Lower-cased microRNA name to miRBase accessions, in file order."""

    accession_names: Mapping[str, tuple[str, ...]]
    """miRBase accession to lower-cased names, in file order."""

    organism_names: Mapping[str, str]
    """Species code to species name."""

    organism_taxa: Mapping[str, str]
    """Species code to NCBI Taxonomy ID."""

    organism_codes: Mapping[str, str]
    """Lower-cased species name to species code."""

    issues: tuple[MappingWarning, ...] = ()
    """Problems found while parsing the tables."""

    def accessions(self, name: str) -> tuple[str, ...]:

        return self.mirna_accessions.get(name.lower(), ())

    def code_for_name(self, organism: str | None) -> str | None:
        """Species code of a species name (case-insensitive)."""

        return self.organism_codes.get(organism.lower()) if organism else None

    def code_from_mirna(self, name: str) -> str | None:
        """
        Species code from the prefix of a microRNA name.

        ``'hsa-miR-21-5p'`` gives ``'hsa'`` if ``hsa`` is a known code.
        """

        code = name.split('-', 1)[0].lower() if '-' in name else None

        return code if code in self.organism_names else None


def empty_tables() -> ReferenceTables:

    return ReferenceTables(*(MappingProxyType({}) for _ in range(5)))


def load(
    aliases: Source = None,
    organisms: Source = None,
    strict: bool = False,
) -> ReferenceTables:
    """
    Load the miRBase alias and organism tables.

    Args:
        aliases:
            Path or open stream of ``aliases.txt``; ``None`` for an empty
            table.  A bare file name not found on disk is looked up in the
            package data directory.
        organisms:
            Path or open stream of ``organisms.txt``; same rules.
        strict:
            Raise on malformed lines instead of skipping them.

    Returns:
        The reference tables.

    Raises:
        FatalInputError: A table can not be read, or a line is malformed
            and *strict* is set.
    """

    issues: list[MappingWarning] = []

    alias_lines = _read_lines(aliases, 'aliases')
    name_to_acc, acc_to_names = _parse_aliases(alias_lines, strict, issues)

    organism_lines = _read_lines(organisms, 'organisms')
    code_names, code_taxa, name_codes = _parse_organisms(
        organism_lines,
        strict,
        issues,
    )

    _log.info(
        'Loaded %d miRBase accessions for %d microRNA names, %d organisms.',
        len(acc_to_names),
        len(name_to_acc),
        len(code_names),
    )

    return ReferenceTables(
        mirna_accessions=MappingProxyType(name_to_acc),
        accession_names=MappingProxyType(acc_to_names),
        organism_names=MappingProxyType(code_names),
        organism_taxa=MappingProxyType(code_taxa),
        organism_codes=MappingProxyType(name_codes),
        issues=tuple(issues),
    )


def _read_lines(source: Source, label: str) -> list[str]:
    """Read all lines of a path or stream; ``None`` reads nothing."""

    if source is None:
        return []

    try:
        if hasattr(source, 'read'):
            content = source.read()
        else:
            path = Path(source)

            if not path.exists() and data_path(path.name).exists():
                path = data_path(path.name)

            with path.open(encoding='utf-8') as f:
                content = f.read()

        if isinstance(content, bytes):
            content = content.decode('utf-8')

    except (OSError, UnicodeDecodeError) as e:
        raise FatalInputError(f'Can not read {label} table: {e}') from e

    return content.splitlines()


def _data_lines(lines: Iterable[str]) -> Iterable[tuple[int, str]]:

    for lineno, line in enumerate(lines, start=1):
        if line.strip() and not line.startswith('#'):
            yield lineno, line


def _malformed(
    label: str,
    lineno: int,
    line: str,
    expected: int,
    strict: bool,
    issues: list[MappingWarning],
) -> None:

    msg = (
        f'{label} line {lineno}: expected at least {expected} '
        f'tab-separated columns: {line!r}'
    )

    if strict:
        raise FatalInputError(msg)

    _log.warning('Skipping malformed %s', msg)
    issues.append(MappingWarning(None, 'malformed_table_line', msg))


def _parse_aliases(
    lines: Iterable[str],
    strict: bool,
    issues: list[MappingWarning],
) -> tuple[dict[str, tuple[str, ...]], dict[str, tuple[str, ...]]]:

    name_to_acc: dict[str, list[str]] = {}
    acc_to_names: dict[str, list[str]] = {}

    for lineno, line in _data_lines(lines):

        cols = line.split(_SEP)
        accession = cols[0].strip()

        if len(cols) < _ALIAS_COLUMNS or not accession:
            _malformed('aliases', lineno, line, _ALIAS_COLUMNS, strict, issues)
            continue

        names = cols[1].strip().rstrip(_NAME_SEP)

        for name in names.split(_NAME_SEP):

            name = name.strip().lower()

            if not name:
                continue

            known = name_to_acc.setdefault(name, [])

            if accession not in known:
                if known:
                    _log.debug(
                        'miRNA name %s maps to: %s;%s',
                        name,
                        ';'.join(known),
                        accession,
                    )
                known.append(accession)

            acc_names = acc_to_names.setdefault(accession, [])

            if name not in acc_names:
                acc_names.append(name)

    return (
        {k: tuple(v) for k, v in name_to_acc.items()},
        {k: tuple(v) for k, v in acc_to_names.items()},
    )


def _parse_organisms(
    lines: Iterable[str],
    strict: bool,
    issues: list[MappingWarning],
) -> tuple[dict[str, str], dict[str, str], dict[str, str]]:

    code_names: dict[str, str] = {}
    code_taxa: dict[str, str] = {}
    name_codes: dict[str, str] = {}

    for lineno, line in _data_lines(lines):

        cols = [c.strip() for c in line.split(_SEP)]

        if len(cols) < _ORGANISM_COLUMNS or not cols[0] or not cols[2]:
            _malformed(
                'organisms',
                lineno,
                line,
                _ORGANISM_COLUMNS,
                strict,
                issues,
            )
            continue

        code, name, taxid = cols[0], cols[2], cols[4]
        code_names[code] = name
        name_codes[name.lower()] = code

        if taxid:
            code_taxa[code] = taxid

    return code_names, code_taxa, name_codes
