"""Report parameters whose config file reference cannot be resolved."""

from ..command import ParameterCommand


class CheckParamsCommand(ParameterCommand):
    name = "check-params"
    help = "Check that every parameter references an existing config file"
    description = """
Check a parameter set before saving it.

Lists every parameter whose config file ID is unset or unknown to the store
and exits with status 1 if there is any. Resolution at render time never
fails on such parameters; they just offer no choices.
"""

    def run(self, args, backend, param_set):
        broken = param_set.validate_sources(backend)
        if not broken:
            print(f"OK: {len(param_set)} parameters, all config files resolved")
            return 0
        for name in broken:
            config_file_id = param_set.get(name).get_config_file_id()
            print(f"UNRESOLVED: {name} -> {config_file_id or '<unset>'}")
        return 1


def register(subparsers):
    CheckParamsCommand().register(subparsers)
