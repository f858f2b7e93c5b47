import os
from typing import Optional

import typer
from dotenv import load_dotenv

# Import logger setup first to ensure logging is configured
from jqline.logger import get_logger, setup_logger
from jqline.application.config import load_query_input_config
from jqline.domain.document import DocumentStore
from jqline.domain.exceptions import DocumentDecodeError
from jqline.presentation.theme import THEMES, get_theme
from jqline.presentation.tui import JqLineApp
from jqline.utils import read_input_bytes

load_dotenv()

cli = typer.Typer(
    name="jqline",
    help="Interactive jq query editor with inline path suggestions",
    epilog="""
    Examples:
    $ jqline data.json
    $ jqline data.json --theme nord
    """,
    add_completion=False,
)


@cli.command()
def main(
    source: str = typer.Argument(..., help="JSON file to query"),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help=f"Colour theme ({', '.join(sorted(THEMES))})"),
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"),
):
    """Open SOURCE in the interactive query editor."""
    setup_logger(log_level="DEBUG" if debug else "INFO")
    logger = get_logger("main")

    try:
        config = load_query_input_config()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    try:
        color_theme = get_theme(theme or config.theme)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=2)

    try:
        document = DocumentStore.from_bytes(read_input_bytes(source))
    except (FileNotFoundError, DocumentDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.info(f"Starting jqline on {source!r} (theme={color_theme.name})")
    app = JqLineApp(document=document, color_theme=color_theme, config=config)
    app.run()


def run():
    """Entry point for the jqline application."""
    cli()


if __name__ == "__main__":
    run()
