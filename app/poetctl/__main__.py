"""Allow running poetctl as ``python -m poetctl``."""

from poetctl.cli.main import app

app()
