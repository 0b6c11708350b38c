"""Base scaffolding for commands that operate on a parameter set file."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..exceptions import CFCError
from ..parameters import ParameterSet
from .args import add_params_file_arg
from .store_utils import get_backend_for_args

logger = logging.getLogger(__name__)


class ParameterCommand:
    """Template method implementation for parameter set commands.

    Subclasses set ``name``/``help`` and implement ``run``; loading the
    store and the parameter file and reporting errors happen here.
    """

    name: Optional[str] = None
    help: Optional[str] = None
    description: Optional[str] = None
    params_file_required: bool = True

    def __init__(self, backend=None):
        self._backend_override = backend

    # ------------------------------------------------------------------
    # Argparse registration helpers
    # ------------------------------------------------------------------
    def register(self, subparsers):
        parser = subparsers.add_parser(
            self.name,
            help=self.help,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description or self.help,
        )
        add_params_file_arg(parser, required=self.params_file_required)
        self.add_custom_args(parser)
        parser.set_defaults(func=self.execute)

    # ------------------------------------------------------------------
    # Execution workflow
    # ------------------------------------------------------------------
    def execute(self, args):
        try:
            backend = self._resolve_backend(args)
            param_set = None
            if getattr(args, "params_file", None):
                param_set = ParameterSet.load(args.params_file)
            return self.run(args, backend, param_set)
        except CFCError as exc:
            logger.debug("Command %s failed", self.name, exc_info=True)
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def add_custom_args(self, parser):
        """Override to add command-specific arguments."""

    def run(self, args, backend, param_set) -> int:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _resolve_backend(self, args):
        if self._backend_override is not None:
            return self._backend_override
        return get_backend_for_args(args)
