#!/usr/bin/env python3
"""
store_utils.py

Common utilities for CLI commands that work with the config file store.
"""

import sys
from typing import Dict

from CFCutils.backends import get_backend
from CFCutils.exceptions import ConfigFileNotFoundError, ValidationError
from CFCutils.settings import get_db_url


def get_backend_for_args(args):
    connection = getattr(args, "db_url", None) or get_db_url()
    return get_backend(connection)


def resolve_config_from_args(args, backend=None):
    """
    Look up the config file named by --config-id.

    Returns:
        The config document, or None after printing an error
    """
    backend = backend or get_backend_for_args(args)
    doc = backend.get_config(args.config_id)
    if doc is None:
        print(f"ERROR: {ConfigFileNotFoundError(args.config_id)}", file=sys.stderr)
        return None
    return doc


def read_content_from_args(args, stdin_fallback=False):
    """Return content from --content, --file or stdin (in that order).

    Piped stdin is only read implicitly when stdin_fallback is set.
    """
    if getattr(args, "content", None) is not None:
        return args.content
    path = getattr(args, "file", None)
    if path and path != "-":
        try:
            with open(path, "r") as f:
                return f.read()
        except OSError as exc:
            raise ValidationError(f"Cannot read {path}: {exc}") from exc
    if path == "-" or (stdin_fallback and not sys.stdin.isatty()):
        return sys.stdin.read()
    return None


def parse_params(param_string: str) -> Dict[str, str]:
    """Parse space separated key=value pairs; tokens without '=' are ignored."""
    result: Dict[str, str] = {}
    for token in (param_string or "").split():
        if "=" in token:
            key, value = token.split("=", 1)
            result[key] = value
    return result
