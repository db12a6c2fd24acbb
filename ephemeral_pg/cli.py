"""
ephemeral-pg command line tool.

Usage:
  ephemeral-pg up                 # Start a throwaway postgres, stop it on Enter/Ctrl+C
  ephemeral-pg up --probe         # Also wait until the port accepts connections
  ephemeral-pg check              # Check that the Docker CLI is available
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import ContainerConfig, settings
from .models.errors import EphemeralPgException
from .services.container import ContainerManager, PostgresContainer, probe_endpoint
from .utils.logging import setup_logging

console = Console(stderr=True)


def build_manager(args) -> ContainerManager:
    """Container manager with command line overrides applied.

    Raises:
        ValidationError: If an override is not a valid setting
    """
    overrides = {}
    if getattr(args, "image", None):
        overrides["postgres_image"] = args.image
    if getattr(args, "settle_delay", None) is not None:
        overrides["settle_delay_seconds"] = args.settle_delay
    if getattr(args, "cleanup_on_failure", False):
        overrides["cleanup_on_failed_launch"] = True

    config: ContainerConfig = settings.container.with_overrides(**overrides)
    return ContainerManager(config=config)


def describe_validation_error(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
    )


def build_container_panel(pg: PostgresContainer) -> Panel:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Container", pg.container_id[:12])
    table.add_row("Address", pg.address())
    table.add_row("DSN", pg.dsn())
    return Panel(table, title="[bold cyan]Postgres[/bold cyan]", border_style="cyan")


# ============================================================================
# Commands
# ============================================================================


def cmd_check(args) -> int:
    """Report whether containers can be launched."""
    try:
        manager = build_manager(args)
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red] {escape(describe_validation_error(e))}")
        return 1
    error = manager.get_initialization_error()
    if error:
        console.print(f"[red]Error:[/red] {error}")
        return 1
    console.print(f"[green]OK[/green] docker binary: {manager.config.docker_binary}")
    return 0


def cmd_up(args) -> int:
    """Start a container and hold it until the user stops it."""
    try:
        manager = build_manager(args)
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red] {escape(describe_validation_error(e))}")
        return 1
    error = manager.get_initialization_error()
    if error:
        console.print(f"[red]Error:[/red] {error}")
        return 1

    try:
        with console.status("Starting postgres container..."):
            pg = PostgresContainer.start(manager)
    except EphemeralPgException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1

    with pg:
        console.print(build_container_panel(pg))

        if args.probe:
            with console.status("Waiting for connections..."):
                ready = probe_endpoint(pg.endpoint, max_wait=args.probe_timeout)
            if ready:
                console.print("[green]Accepting connections[/green]")
            else:
                console.print(
                    f"[yellow]No connection after {args.probe_timeout}s[/yellow]"
                )

        # Machine-readable address on stdout for shell scripts
        print(pg.address(), flush=True)

        console.print("[dim]Press Enter or Ctrl+C to stop[/dim]")
        try:
            input()
        except (KeyboardInterrupt, EOFError):
            console.print()

    console.print("[green]Container stopped.[/green]")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ephemeral-pg",
        description="Throwaway PostgreSQL containers for tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s up                          # Default image, 2s settling delay
  %(prog)s up --image postgres:16      # Pin the image
  %(prog)s up --probe                  # Wait until the port accepts connections
  %(prog)s check                       # Check Docker availability
""",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: settings)")
    parser.add_argument(
        "--json-logs", action="store_true", help="Render logs as JSON lines"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # up
    up_p = subparsers.add_parser("up", help="Start a container until interrupted")
    up_p.add_argument("--image", help="Image to run (default: settings)")
    up_p.add_argument(
        "--settle-delay", type=float, help="Seconds to wait after start"
    )
    up_p.add_argument(
        "--cleanup-on-failure",
        action="store_true",
        help="Remove the container if the launch fails after start",
    )
    up_p.add_argument("--probe", action="store_true", help="Probe the port after start")
    up_p.add_argument(
        "--probe-timeout", type=float, default=10.0, help="Probe timeout in seconds"
    )

    # check
    subparsers.add_parser("check", help="Check that the Docker CLI is available")

    args = parser.parse_args(argv)

    try:
        setup_logging(
            level=args.log_level,
            log_format="json" if args.json_logs else None,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red] {escape(describe_validation_error(e))}")
        return 1

    handlers = {
        "up": cmd_up,
        "check": cmd_check,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
