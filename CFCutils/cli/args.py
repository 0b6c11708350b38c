"""Reusable argparse argument helpers."""

from __future__ import annotations


def add_config_id_arg(parser, required=True):
    parser.add_argument(
        "-c",
        "--config-id",
        required=required,
        help="Config file ID in the store",
    )


def add_config_fields_args(parser):
    parser.add_argument("--name", help="Human-readable config file name")
    parser.add_argument("--comment", help="Free-form comment")
    parser.add_argument("--provider-id", help="Provider/kind of the config file")


def add_content_args(parser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-f",
        "--file",
        help='Read content from a file ("-" for stdin)',
    )
    group.add_argument(
        "--content",
        help="Content given inline; use real newlines or $'a\\nb'",
    )


def add_params_file_arg(parser, required=True):
    parser.add_argument(
        "-p",
        "--params-file",
        required=required,
        help="YAML parameter set file",
    )


def add_param_name_arg(parser, required=False, multiple=False):
    if multiple:
        parser.add_argument(
            "-n",
            "--name",
            dest="param_names",
            action="append",
            help="Parameter name (repeatable; default: all)",
        )
    else:
        parser.add_argument(
            "-n",
            "--name",
            dest="param_name",
            required=required,
            help="Parameter name within the parameter set",
        )


def add_context_params_arg(parser):
    parser.add_argument(
        "-x",
        "--context-params",
        default="",
        help='Space separated key=value pairs for sibling field values (e.g. "ENV=prod")',
    )
