"""Command line interface for the config file store and choice parameters."""
