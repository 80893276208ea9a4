"""
Song Lookup CLI - Entry point

Loads a song CSV file and offers one-shot lookups, full listings, an
interactive shell and a search form.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from song_lookup import router
from song_lookup.commands import songs
from song_lookup.context import AppContext
from song_lookup.core import config as config_module
from song_lookup.core.console import configure_console
from song_lookup.core.output import setup_loguru
from song_lookup.utils import parsers


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the song-lookup command."""
    parser = argparse.ArgumentParser(
        prog="song-lookup",
        description="Song Lookup - load song data from CSV and look songs up by ID",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-f",
        "--file",
        help="CSV file to load (default: config data.csv_path or $SONG_LOOKUP_CSV_PATH)",
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Treat the first line of the file as data",
    )
    parser.add_argument("--config", help="Path to config.toml")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    show_parser = subparsers.add_parser(
        "show", help="Look up one song, then print every song"
    )
    show_parser.add_argument(
        "--id", dest="song_id", help="Song ID to look up (default: config lookup.default_song_id)"
    )

    get_parser = subparsers.add_parser("get", help="Print the song with this ID")
    get_parser.add_argument("song_id", help="Song ID")

    list_parser = subparsers.add_parser("list", help="Print every song")
    list_parser.add_argument(
        "--table", action="store_true", help="Print a summary table instead"
    )

    subparsers.add_parser("search", help="Open the interactive search form")
    subparsers.add_parser("shell", help="Start the interactive shell (default)")

    return parser


def interactive_shell(ctx: AppContext) -> int:
    """Run the interactive command loop.

    Args:
        ctx: Application context (store may already be loaded)

    Returns:
        Exit code
    """
    console = ctx.console
    console.print("[bold green]Welcome to Song Lookup![/bold green]")
    console.print("Type 'help' for available commands, or 'quit' to exit.")
    console.print()

    should_continue = True
    while should_continue:
        try:
            user_input = input("song-lookup> ").strip()
            command, args = parsers.parse_command(user_input)
            ctx, should_continue = router.handle_command(ctx, command, args)
        except KeyboardInterrupt:
            console.print("\n[yellow]Use 'quit' or 'exit' to leave gracefully.[/yellow]")
        except EOFError:
            console.print("\n[green]Goodbye![/green]")
            break

    return 0


def run_search_form(ctx: AppContext) -> int:
    """Open the Textual search form over the loaded store."""
    from song_lookup.ui.search import SongSearchApp

    SongSearchApp(ctx.store, title=ctx.config.ui.window_title).run()
    return 0


def run(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, load songs and dispatch the subcommand.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)

    config_path = Path(args.config).expanduser() if args.config else None
    current_config = config_module.load_config(config_path)

    setup_loguru(
        config_module.get_log_file_path(current_config),
        level=args.log_level or current_config.logging.level,
        console_output=current_config.logging.console_output,
    )
    console = configure_console(current_config.ui.use_colors)
    ctx = AppContext.create(current_config, console)

    csv_path = args.file or current_config.data.csv_path
    header = False if args.no_header else current_config.data.has_header
    subcommand = args.subcommand or "shell"
    logger.debug(f"Running '{subcommand}' with {csv_path} (header={header})")

    ctx, loaded = songs.load_songs(ctx, csv_path, header=header)

    if subcommand == "shell":
        # A failed initial load is recoverable with the `load` command
        return interactive_shell(ctx)

    if not loaded:
        return 1

    if subcommand == "show":
        songs.show_song(ctx, args.song_id or current_config.lookup.default_song_id)
        songs.print_all_songs(ctx)
        return 0

    if subcommand == "get":
        return 0 if songs.show_song(ctx, args.song_id) else 1

    if subcommand == "list":
        if args.table:
            songs.handle_table_command(ctx)
        else:
            songs.print_all_songs(ctx)
        return 0

    if subcommand == "search":
        return run_search_form(ctx)

    return 1


def main() -> None:
    """Main entry point for the song-lookup command."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
