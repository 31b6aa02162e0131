"""CLI subcommands, registered on the main group in ``devsetup.main``."""
