"""Resolve choices for a config file or for a parameter in a parameter set."""

import sys

import yaml

from ..args import add_config_id_arg, add_context_params_arg, add_param_name_arg
from ..command import ParameterCommand
from ..store_utils import parse_params
from ...parameters import resolve_choices


class ChoicesCommand(ParameterCommand):
    name = "choices"
    help = "Print the current choices of a config file or parameter"
    description = """
Print the choices a parameter would offer right now.

Either resolve a config file directly (-c) or a parameter from a YAML
parameter set (-p/-n). A missing config file prints nothing and logs an
error; it is not treated as a failure.

EXAMPLES:
  cfc_db choices -c shells
  cfc_db choices -p job.yaml -n SHELL --format yaml
"""
    params_file_required = False

    def add_custom_args(self, parser):
        add_config_id_arg(parser, required=False)
        add_param_name_arg(parser)
        add_context_params_arg(parser)
        parser.add_argument(
            "--format",
            choices=("text", "yaml"),
            default="text",
            help="Output format (default: text, one choice per line)",
        )

    def run(self, args, backend, param_set):
        if param_set is not None:
            if not args.param_name:
                print("ERROR: --name is required with --params-file", file=sys.stderr)
                return 1
            param = param_set.get(args.param_name)
            choices = param.get_choices(parse_params(args.context_params), store=backend)
        elif args.config_id:
            choices = resolve_choices(args.config_id, store=backend)
        else:
            print("ERROR: Pass --config-id or --params-file/--name", file=sys.stderr)
            return 1

        if args.format == "yaml":
            sys.stdout.write(yaml.safe_dump(choices, default_flow_style=False, sort_keys=False))
        else:
            for value in choices:
                print(value)
        return 0


def register(subparsers):
    ChoicesCommand().register(subparsers)
