import sys

from ...exceptions import CFCError, ConfigFileNotFoundError
from ..args import add_config_id_arg
from ..store_utils import get_backend_for_args, resolve_config_from_args


def register(subparsers):
    p = subparsers.add_parser(
        'show-config',
        help='Print a config file and its metadata',
    )
    add_config_id_arg(p)
    p.add_argument('--content-only', action='store_true', help='Print the raw content only')
    p.set_defaults(func=do_show)


def do_show(args):
    try:
        backend = get_backend_for_args(args)
        if args.content_only:
            content = backend.get_content(args.config_id)
            if content is None:
                raise ConfigFileNotFoundError(args.config_id)
            sys.stdout.write(content)
            return 0
        doc = resolve_config_from_args(args, backend)
    except CFCError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    if doc is None:
        return 1

    print(f"id:          {doc['config_id']}")
    for key in ('name', 'comment', 'provider_id', 'created_at', 'updated_at'):
        print(f"{key + ':':<13}{doc.get(key) or ''}")
    print("content:")
    for line in (doc.get('content') or '').split('\n'):
        print(f"  {line}")
    return 0
