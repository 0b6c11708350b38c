#!/usr/bin/env python3
import argparse
import importlib
import pkgutil
import sys

from ..logging_config import get_logger, setup_logging
from ..settings import get_log_level

logger = get_logger("cli")


def _generate_command_help(subparsers):
    """Auto-generate command list from registered subparsers."""
    commands = []

    for name in sorted(subparsers.choices.keys()):
        parser = subparsers.choices[name]
        help_text = parser.description or ''
        commands.append(f"  {name:<20} {help_text.strip().splitlines()[0] if help_text.strip() else ''}")

    lines = ["Available commands:", ""]
    lines.extend(commands)
    return "\n".join(lines)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cfc_db",
        description="Config file store and dynamic choice parameter tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--db',
        dest='db_url',
        help='Store connection string (overrides CFC_DB_URL)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level: DEBUG, INFO, WARNING, ERROR (default: CFC_LOG_LEVEL or WARNING)',
    )
    parser.add_argument('--log-file', help='Also write logs to this file')

    subs = parser.add_subparsers(dest='cmd')

    # Import every module in cli/commands and call its register()
    pkg = importlib.import_module('CFCutils.cli.commands')
    for finder, name, ispkg in pkgutil.iter_modules(pkg.__path__):
        mod = importlib.import_module(f"CFCutils.cli.commands.{name}")
        if hasattr(mod, 'register'):
            mod.register(subs)

    command_help = _generate_command_help(subs)
    parser.epilog = f"""
{command_help}

DATABASE CONNECTION:
Use the CFC_DB_URL environment variable or --db:
  export CFC_DB_URL=mongodb://host:port/database?authSource=admin
  export CFC_DB_URL=sqlite:///path/to/cfc_store.sqlite
Without either, ./cfc_store.sqlite is used.

For detailed help: cfc_db <command> --help
"""
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or get_log_level(), log_file=args.log_file)

    if not args.cmd:
        parser.print_help()
        return 1

    logger.debug("Running %s", args.cmd)
    # every module must set args.func to its handler in register()
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
