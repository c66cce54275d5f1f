"""Allow running as ``python -m release_gen``."""

from release_gen.cli.app import app

app()
