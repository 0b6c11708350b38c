import sys

from ...exceptions import CFCError
from ...parameters import parse_choices
from ..store_utils import get_backend_for_args


def register(subparsers):
    p = subparsers.add_parser(
        'list-configs',
        help='List all config files'
    )
    p.add_argument(
        '--detailed',
        action='store_true',
        help='Show comment, provider and choice count'
    )
    p.set_defaults(func=do_list)


def do_list(args):
    try:
        configs = get_backend_for_args(args).list_configs(detailed=args.detailed)
    except CFCError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if not configs:
        print("No config files found")
        return 0

    for c in configs:
        label = f" {c['name']}" if c.get('name') else ""
        print(f"[{c['config_id']}]{label}")
        if args.detailed:
            for key in ('comment', 'provider_id', 'updated_at'):
                if c.get(key):
                    print(f"  {key} = {c[key]}")
            print(f"  choices = {len(parse_choices(c.get('content')))}")
    return 0
