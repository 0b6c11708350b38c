#!/usr/bin/env python3
"""Replace the content or metadata of an existing config file."""

import sys

from ...exceptions import CFCError, ConfigFileNotFoundError
from ..args import add_config_fields_args, add_config_id_arg, add_content_args
from ..store_utils import get_backend_for_args, read_content_from_args


def register(subparsers):
    p = subparsers.add_parser(
        'update-config',
        help='Update content or metadata of a config file',
        description='Update a config file in place. Parameters pick the change up on their next resolution.',
    )
    add_config_id_arg(p)
    add_content_args(p)
    add_config_fields_args(p)
    p.set_defaults(func=do_update)


def do_update(args):
    updates = {}
    for field in ('name', 'comment', 'provider_id'):
        value = getattr(args, field, None)
        if value is not None:
            updates[field] = value

    try:
        content = read_content_from_args(args)
        if content is not None:
            updates['content'] = content
        if not updates:
            print("ERROR: Nothing to update", file=sys.stderr)
            return 1

        backend = get_backend_for_args(args)
        if not backend.update_config(args.config_id, **updates):
            raise ConfigFileNotFoundError(args.config_id)
    except CFCError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"Updated config file {args.config_id}: {', '.join(sorted(updates))}")
    return 0
