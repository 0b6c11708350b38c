"""Describe parameters of a parameter set with their current choices."""

from ..args import add_param_name_arg
from ..command import ParameterCommand
from ...templates import ContextBuilder, TemplateLoader, TemplateRenderer


class DescribeParamCommand(ParameterCommand):
    name = "describe-param"
    help = "Show parameter definitions and their current choices"

    def add_custom_args(self, parser):
        add_param_name_arg(parser, multiple=True)
        parser.add_argument(
            "--template-dir",
            help="Directory with a text/describe.j2 overriding the packaged one",
        )

    def run(self, args, backend, param_set):
        context = ContextBuilder(backend).build_describe_context(param_set, args.param_names)
        renderer = TemplateRenderer(TemplateLoader(args.template_dir))
        print(renderer.render_describe(context), end="")
        return 0


def register(subparsers):
    DescribeParamCommand().register(subparsers)
