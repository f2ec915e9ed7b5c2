"""
Serve Command - Run the language server over stdio.
"""

import click


@click.command()
def serve() -> None:
    """
    Start the gqlhover language server on stdin/stdout.

    Configure the schema with initializationOptions {"schema": "path"} or
    schema_path in the workspace's .gqlhover.yaml.
    """
    # Imported lazily: the server module configures logging and pygls on import
    from ...lsp.server import main as run_server

    run_server()
