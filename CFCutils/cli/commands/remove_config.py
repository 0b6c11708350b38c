import sys

from ...exceptions import CFCError
from ..args import add_config_id_arg
from ..store_utils import get_backend_for_args, resolve_config_from_args


def register(subparsers):
    p = subparsers.add_parser(
        'remove-config',
        help='Remove a config file from the store',
        description="""
Remove a config file from the store.

Parameters that still reference it resolve to no choices and log an error
until they are pointed at another config file. Run check-params first to
see which parameter sets use it.
        """,
    )
    add_config_id_arg(p)
    p.add_argument(
        '--force',
        action='store_true',
        help='Skip confirmation prompt and remove immediately'
    )
    p.set_defaults(func=do_remove)


def do_remove(args):
    try:
        backend = get_backend_for_args(args)
        doc = resolve_config_from_args(args, backend)
        if not doc:
            return 1

        print(f"Removing config file {doc['config_id']}")
        if not args.force:
            if input("Proceed? (y/N) ").lower() not in ('y', 'yes'):
                print("Aborted")
                return 0

        ok = backend.delete_config(args.config_id)
    except CFCError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print("DB removal:", "OK" if ok else "FAILED")
    return 0 if ok else 1
