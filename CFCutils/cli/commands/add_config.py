#!/usr/bin/env python3
"""
commands/add_config.py

Add a config file to the store. Each line of its content becomes one choice
for parameters that reference it.

Examples:
  cfc_db add-config -c shells --content $'bash\nzsh\nfish'
  cfc_db add-config -c regions -f regions.txt --name "AWS regions"
  printf 'a\nb\n' | cfc_db add-config -c letters
"""

import argparse
import sys

from ...exceptions import CFCError
from ..args import add_config_fields_args, add_config_id_arg, add_content_args
from ..store_utils import get_backend_for_args, read_content_from_args


def register(subparsers):
    p = subparsers.add_parser(
        'add-config',
        help='Add a config file to the store',
        description=__doc__.split('\n', 3)[3],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_config_id_arg(p)
    add_content_args(p)
    add_config_fields_args(p)
    p.set_defaults(func=do_add)


def do_add(args):
    try:
        content = read_content_from_args(args, stdin_fallback=True)
        if content is None:
            print("ERROR: No content given (use --content, --file or pipe to stdin)", file=sys.stderr)
            return 1
        backend = get_backend_for_args(args)
        config_id = backend.add_config(
            args.config_id,
            content,
            name=args.name,
            comment=args.comment,
            provider_id=args.provider_id,
        )
    except CFCError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    print(f"Added config file: {config_id}")
    return 0
