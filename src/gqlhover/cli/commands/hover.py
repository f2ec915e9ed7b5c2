"""
Hover Command - Show hover information for a position in a document.
"""

import sys
from typing import Optional

import click
from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ...core.schema import read_document
from ...hover import Position, get_hover_information
from ..utils import echo_error, echo_warning, load_config_or_exit, load_schema_or_exit

console = Console()


# --- API Models ---
class HoverResponse(BaseModel):
    document: str
    line: int
    character: int
    found: bool
    contents: str


@click.command()
@click.argument("document_file", type=click.Path(exists=True, dir_okay=False))
@click.option("-s", "--schema", "schema_path", default=None,
              help="Schema SDL or introspection JSON (defaults to schema_path in config)")
@click.option("-l", "--line", type=click.IntRange(min=0), required=True,
              help="Zero-based line of the cursor")
@click.option("-c", "--character", type=click.IntRange(min=0), required=True,
              help="Zero-based character of the cursor")
@click.option("--markdown/--plain", default=None,
              help="Fence the signature in a ```graphql block")
@click.option("--config", "config_path", type=click.Path(), default=None,
              help="Config file or directory containing .gqlhover.yaml")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def hover(
    document_file: str,
    schema_path: Optional[str],
    line: int,
    character: int,
    markdown: Optional[bool],
    config_path: Optional[str],
    as_json: bool,
) -> None:
    """
    Show hover information at LINE:CHARACTER in DOCUMENT_FILE.
    """
    config = load_config_or_exit(config_path)
    if markdown is not None:
        config = config.model_copy(update={"use_markdown": markdown})

    schema = load_schema_or_exit(schema_path or config.schema_path)

    document = read_document(document_file)
    if document.is_err():
        echo_error(str(document.error))
        sys.exit(1)

    contents = get_hover_information(schema, document.unwrap(), Position(line, character), config)

    if as_json:
        response = HoverResponse(
            document=document_file,
            line=line,
            character=character,
            found=bool(contents),
            contents=contents,
        )
        click.echo(response.model_dump_json(indent=2))
        return

    if not contents:
        echo_warning(f"No hover information at {line}:{character}")
        return

    console.print(Panel(Text(contents), title=f"{document_file}:{line}:{character}", expand=False))
