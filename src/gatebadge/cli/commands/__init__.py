"""CLI subcommands registered on the gatebadge app."""
