"""
gqlhover CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import hover, serve


@click.group()
@click.version_option(package_name="gqlhover")
def main():
    """gqlhover: hover information for GraphQL documents.

    \b
    Quick Start:
      gqlhover hover query.graphql --schema schema.graphql -l 0 -c 10
      gqlhover serve
    """
    pass


# Register commands
main.add_command(hover.hover)
main.add_command(serve.serve)

if __name__ == "__main__":
    main()
