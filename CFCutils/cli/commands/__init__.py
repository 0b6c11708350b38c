"""CLI subcommands; every module exposes register(subparsers)."""
