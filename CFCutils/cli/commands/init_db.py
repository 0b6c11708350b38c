#!/usr/bin/env python3
"""Verify the store connection and create its schema/indexes."""

import sys

from ...exceptions import CFCError
from ..store_utils import get_backend_for_args


def register(subparsers):
    p = subparsers.add_parser(
        'init-db',
        help='Create the store schema and verify the connection',
        description='Ensure the configured config file store is reachable and initialised.'
    )
    p.set_defaults(func=do_init)


def do_init(args):
    try:
        backend = get_backend_for_args(args)
        # Trigger a simple call to ensure connection/indexes are ready
        count = len(backend.list_configs(detailed=False))
    except CFCError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    print(f"Database connection OK ({backend.connection_string}, {count} config files)")
    return 0
