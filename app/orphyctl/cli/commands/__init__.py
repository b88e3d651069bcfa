"""CLI subcommands for orphyctl."""
