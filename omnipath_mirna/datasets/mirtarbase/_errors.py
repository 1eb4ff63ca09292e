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
Exceptions raised while building the miRTarBase graph.

Fatal errors (:class:`FatalInputError`, :class:`IdentityCollisionError`)
propagate to the caller and abort the conversion.  Recoverable errors are
caught by the driver or the row mapper and turned into
:class:`~._record.MappingWarning` entries.
"""

from __future__ import annotations

__all__ = [
    'FatalInputError',
    'IdentityCollisionError',
    'MappingError',
    'RecoverableFieldError',
    'RecoverableParseError',
]


class MappingError(Exception):
    """Base class of all conversion errors."""


class FatalInputError(MappingError):
    """An input stream or reference table can not be read or parsed."""


class RecoverableFieldError(MappingError):
    """A record lacks one or more required text fields."""

    def __init__(
        self,
        fields: tuple[str, ...],
        row: int | None = None,
        record_id: str | None = None,
    ):

        self.fields = tuple(fields)
        self.row = row
        self.record_id = record_id

        super().__init__(
            f'Row {row} ({record_id or "no ID"}): '
            f'missing required field(s): {", ".join(self.fields)}'
        )


class RecoverableParseError(MappingError):
    """A numeric cell could not be parsed."""

    def __init__(self, field: str, value):

        self.field = field
        self.value = value

        super().__init__(f'{field}: not a positive integer: {value!r}')


class IdentityCollisionError(MappingError):
    """Two distinct business keys were mapped to the same identifier."""
