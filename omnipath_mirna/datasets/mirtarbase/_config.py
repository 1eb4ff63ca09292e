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
miRTarBase graph builder configuration.

Built-in defaults live in ``data/default_config.yaml``.  Callers layer
dicts, YAML files and keyword arguments on top of them.
"""

from __future__ import annotations

__all__ = ['config', 'default_config']

import copy
from typing import TYPE_CHECKING

import yaml

from .data import data_path
from ._xrefs import XREF_TYPES

if TYPE_CHECKING:
    from pathlib import Path


def default_config() -> dict:
    """
    Load the built-in default configuration.

    Returns:
        Nested dict with the full default config.
    """

    return _load_yaml(data_path('default_config.yaml'))


def config(
    *args: dict | Path | str,
    **kwargs,
) -> dict:
    """
    Build a configuration by merging defaults with overrides.

    Positional arguments are applied first (dicts or YAML file paths),
    then keyword arguments are merged as a final layer.  Keyword
    arguments named after a cross-reference type (``publication``,
    ``relationship``, ``unification``) set the deduplication scope of
    that type, as a shorthand for nesting under ``xref_scope``.

    Args:
        *args:
            Dicts or paths to YAML files.  Later values take
            precedence over earlier ones.
        **kwargs:
            Config keys merged last.

    Returns:
        Merged configuration dict.

    Examples::

        # Use all defaults
        cfg = config()

        # One pathway per microRNA species, drop unused miRBase entities
        cfg = config(pathway_per_organism=True, remove_dangling=True)

        # Share publication references between regulations
        cfg = config(publication='global')

        # Load from a YAML file, then override
        cfg = config('my_config.yaml', aliases='aliases.txt')
    """

    result = default_config()

    for arg in args:
        if isinstance(arg, dict):
            layer = arg
        else:
            layer = _load_yaml(arg)

        _deep_merge(result, layer)

    if kwargs:
        _deep_merge(result, _expand_kwargs(kwargs))

    return result


def _expand_kwargs(kwargs: dict) -> dict:
    """
    Expand shorthand kwargs into the full config structure.

    Keys naming a cross-reference type move under ``xref_scope``, e.g.
    ``publication='global'`` becomes
    ``{'xref_scope': {'publication': 'global'}}``.  All other keys pass
    through unchanged.
    """

    expanded: dict = {}
    scopes: dict = {}

    for key, value in kwargs.items():
        if key in XREF_TYPES:
            scopes[key] = value
        else:
            expanded[key] = value

    if scopes:
        expanded.setdefault('xref_scope', {})
        _deep_merge(expanded['xref_scope'], scopes)

    return expanded


def _load_yaml(path: Path | str) -> dict:
    """Read a YAML mapping from *path*; an empty file gives ``{}``."""

    with open(path) as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Merge *override* into *base* in place.

    Nested dicts merge key by key; any other value (lists included)
    replaces the value in *base*.

    Returns:
        The mutated *base* dict.
    """

    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)

    return base
