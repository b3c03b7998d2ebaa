"""ClearOut CLI — scan bio pages from the terminal or serve the HTTP API.

Usage:
    python cli/main.py --help

Commands:
    scan   → fetch a page, probe every link, print a report
    serve  → run the FastAPI app with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from clearout.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from clearout.config import settings
from clearout.log import setup_logging
from clearout.scanner import ScanError, render_links_html, run_scan
from cli.rendering import render_links, render_summary

app = typer.Typer(
    name="clearout",
    help="ClearOut bio-page link checker.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging for every sub-command."""
    setup_logging("DEBUG" if verbose else settings.log_level)


# ---------------------------------------------------------------------------
# Scan
# ---------------------------------------------------------------------------
@app.command("scan")
def scan(
    url: str = typer.Argument(..., help="Bio page URL to scan."),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", "-c", min=1, help="Links probed at once (default from settings)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result."),
    export: Optional[Path] = typer.Option(
        None, "--export", help="Write working, non-redirect links to an HTML file."
    ),
) -> None:
    """Scan a page and report which of its links work, redirect or are broken."""
    if not as_json:
        typer.echo(f"[scan] Scanning {url!r} …")
    try:
        result = run_scan(url, concurrency=concurrency)
    except ScanError as exc:
        typer.echo(f"[scan] ❌ {exc.message}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(render_summary(result))
        if result.links:
            typer.echo("")
            typer.echo(render_links(result.links))

    if export is not None:
        export.write_text(render_links_html(result) + "\n", encoding="utf-8")
        if not as_json:
            typer.echo(f"[scan] Exported clean links to {export}")


# ---------------------------------------------------------------------------
# Serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes."),
) -> None:
    """Run the HTTP API (POST /api/scan-links)."""
    import uvicorn

    typer.echo(f"[serve] Listening on http://{host}:{port}")
    uvicorn.run("clearout.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
