from ...parameters import list_parameter_types


def register(subparsers):
    p = subparsers.add_parser(
        'param-types',
        help='List registered parameter types',
        description='List the parameter types that can be used in a parameter set file.',
    )
    p.set_defaults(func=do_list_types)


def do_list_types(args):
    for descriptor in list_parameter_types():
        print(f"{descriptor.symbol:<30} {descriptor.display_name}")
    return 0
