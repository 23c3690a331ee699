"""CLI for gatebadge."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from gatebadge.cli.commands import statuses as _statuses_module  # noqa: F401
from gatebadge.cli.main import app, main


__all__ = ["app", "main"]
