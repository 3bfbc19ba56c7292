"""Helper functions for CLI commands."""

from pathlib import Path
from typing import NoReturn

import click

from ragprep.client.samples import create_sample_config, create_sample_documents
from ragprep.errors import ConfigMissingError, RagPrepError


def abort_with_error(error: Exception | str, hint: str | None = None) -> NoReturn:
    """Print an error (and optional hint) to stderr and abort with exit code 1.

    Raises:
        click.Abort: Always
    """
    click.echo(f"✗ Error: {error}", err=True)
    if hint:
        click.echo(f"  {hint}", err=True)
    raise click.Abort()


def hint_for(error: RagPrepError) -> str | None:
    """Return a follow-up suggestion for errors the user can fix locally."""
    if isinstance(error, ConfigMissingError):
        return "Run with --create-samples to create a sample config file"
    return None


def write_samples(config_path: Path, docs_path: Path) -> None:
    """Write the sample config and documents, then print next steps."""
    if create_sample_config(config_path):
        click.echo(f"✓ Sample config created at {config_path}. Please update it with your API keys.")
    else:
        click.echo(f"• Config {config_path} already exists, leaving it untouched")

    click.echo("Creating sample documents...")
    for path in create_sample_documents(docs_path):
        click.echo(f"  ✓ Created {path.name}")

    click.echo("\n✓ Sample files created successfully!")
    click.echo("Next steps:")
    click.echo(f"  1. Update {config_path} with your API keys")
    click.echo(f"  2. Add your documents to the {docs_path} directory")
    click.echo("  3. Run: ragprep")
