"""
Song command handlers for Song Lookup.

Handles: load, get, list, table, count, export
"""

from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

from song_lookup.context import AppContext
from song_lookup.core.console import get_console, safe_print
from song_lookup.core.output import log
from song_lookup.domain.songs import (
    CSV_FIELDS,
    FormatError,
    SourceReadError,
    build_songs_table,
    format_record,
    get_display_name,
)


def load_songs(
    ctx: AppContext, path: Optional[str] = None, header: Optional[bool] = None
) -> Tuple[AppContext, bool]:
    """Load songs into the context's store, reporting the outcome.

    Args:
        ctx: Application context
        path: CSV file to load (default: config data.csv_path)
        header: Whether to skip a header line (default: config data.has_header)

    Returns:
        (updated_context, success)
    """
    path = path or ctx.config.data.csv_path
    if header is None:
        header = ctx.config.data.has_header

    try:
        count = ctx.store.load(path, header=header)
    except SourceReadError as e:
        log(f"Error reading CSV file: {e.reason}", "error")
        return ctx, False
    except FormatError as e:
        log(f"Error parsing CSV file: {e}", "error")
        return ctx, False

    log("Songs successfully loaded from CSV.", "success")
    log(f"   {count} rows read, {len(ctx.store)} songs in store", "info")
    return ctx.with_source_path(path), True


def show_song(ctx: AppContext, song_id: str) -> bool:
    """Print one song, or a not-found message.

    Returns:
        True if the song was found
    """
    song = ctx.store.get(song_id)
    if song is None:
        log(f"Song with ID {song_id} not found.", "warning")
        return False

    safe_print(f"Retrieved song: {get_display_name(song)}", style="bold green")
    safe_print(format_record(song))
    return True


def print_all_songs(ctx: AppContext) -> None:
    """Print every song in the store as a labelled block."""
    songs = ctx.store.all()
    if not songs:
        log("No songs loaded. Load a file with: load <path>", "info")
        return

    for index, song in enumerate(songs):
        if index:
            safe_print("")
        safe_print(format_record(song))


def handle_load_command(ctx: AppContext, args: List[str]) -> Tuple[AppContext, bool]:
    """Handle load command - load a CSV file into the store.

    Usage: load [path] [--no-header]

    Args:
        ctx: Application context
        args: Command arguments

    Returns:
        (updated_context, should_continue)
    """
    header = False if "--no-header" in args else None
    paths = [a for a in args if a != "--no-header"]

    ctx, _ = load_songs(ctx, paths[0] if paths else None, header=header)
    return ctx, True


def handle_get_command(ctx: AppContext, args: List[str]) -> Tuple[AppContext, bool]:
    """Handle get command - look up a song by ID."""
    if not args:
        log("Error: Please specify a song ID", "error")
        log("Usage: get <song_id>", "info")
        return ctx, True

    show_song(ctx, args[0])
    return ctx, True


def handle_list_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Handle list command - print every loaded song."""
    print_all_songs(ctx)
    return ctx, True


def handle_table_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Handle table command - print a summary table of loaded songs."""
    if not len(ctx.store):
        log("No songs loaded. Load a file with: load <path>", "info")
        return ctx, True

    console = ctx.console or get_console()
    console.print(build_songs_table(ctx.store.all()))
    return ctx, True


def handle_count_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Handle count command - show how many songs are loaded."""
    source = f" from {ctx.source_path}" if ctx.source_path else ""
    log(f"{len(ctx.store)} songs loaded{source}", "info")
    return ctx, True


def handle_export_command(ctx: AppContext, args: List[str]) -> Tuple[AppContext, bool]:
    """Handle export command - write the store back out as CSV.

    The file gets a header row followed by one line per song, in the same
    column order the loader expects.
    """
    if not args:
        log("Error: Please specify an output path", "error")
        log("Usage: export <path>", "info")
        return ctx, True

    output_path = Path(args[0]).expanduser()
    songs = ctx.store.all()
    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(",".join(CSV_FIELDS) + "\n")
            for song in songs:
                f.write(song.to_line() + "\n")
    except OSError as e:
        logger.exception(f"Export to {output_path} failed")
        log(f"Error writing CSV file: {e}", "error")
        return ctx, True

    log(f"Exported {len(songs)} songs to {output_path}", "success")
    return ctx, True
