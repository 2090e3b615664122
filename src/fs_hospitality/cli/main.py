"""Command-line interface for fs-hospitality.

This module provides the command-line interface for fs-hospitality, exposing the
text detection, text conversion and directory listing utilities as subcommands.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error or invalid pattern
    126: Permission denied
    141: Broken pipe (output closed early, e.g. piping to `head`)

Example:
    # Show the encoding and EOL style of a file
    $ fs-hospitality detect-text-spec notes.txt

    # List only directories as a tree
    $ fs-hospitality list -d --tree /path/to/dir
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Iterator, List

from fs_hospitality.cli.argparser import create_parser, validate_args
from fs_hospitality.exceptions import InvalidPatternError
from fs_hospitality.text.encoding import detect_text_encoding
from fs_hospitality.text.eol import detect_text_eol
from fs_hospitality.text.reader import read_as_text
from fs_hospitality.text.writer import write_as_text
from fs_hospitality.walker.entry_descriptor import EntryDescriptor
from fs_hospitality.walker.traversal import TraversalEngine
from fs_hospitality.walker.tree_view import build_entry_tree, render_entry_tree
from fs_hospitality.walker.walk_configuration import WalkConfiguration


def configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr when verbose output is requested."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def detect_text_spec_lines(args: argparse.Namespace) -> Iterator[str]:
    """Generate the output lines of the detect-text-spec subcommand."""
    data = args.file.read_bytes()
    if args.type in ("all", "encoding"):
        yield detect_text_encoding(data)
    if args.type in ("all", "eol"):
        yield detect_text_eol(data)


def convert_text_file(args: argparse.Namespace) -> None:
    """Re-write a text file as requested by the conv-text-enc subcommand."""
    text = read_as_text(args.file)
    dest = args.dest if args.dest else args.file
    write_as_text(dest, text, trim=args.trim, eol=args.eol, bom=args.bom, encoding=args.encoding)


def walk_configuration_from_args(args: argparse.Namespace) -> WalkConfiguration:
    """Build the walk configuration for the list subcommand."""
    return WalkConfiguration(
        only_directories=args.only_dirs,
        only_files=args.only_files,
        exclude_symlinks=args.exclude_symlinks,
        match_pattern=args.match,
        ignore_pattern=args.ignore,
        include_descriptors=True,
        max_concurrency=args.jobs,
    )


def format_entry(entry: EntryDescriptor, long: bool) -> str:
    """Format one walk entry as an output line.

    Args:
        entry: The entry to format.
        long: Prefix the path with the entry type.

    Returns:
        The relative path, or the entry type and the relative path.
    """
    if long:
        return f"{entry.entry_type.value:<9} {entry.relative_path}"
    return entry.relative_path


def list_directory_lines(args: argparse.Namespace) -> Iterator[str]:
    """Generate the output lines of the list subcommand."""
    engine = TraversalEngine(walk_configuration_from_args(args))
    entries: List[EntryDescriptor]
    if args.concurrent:
        entries = asyncio.run(engine.walk_async(args.directory))
    else:
        entries = engine.walk(args.directory)

    if args.tree:
        root_name = os.path.basename(os.path.abspath(args.directory))
        yield from render_entry_tree(build_entry_tree(root_name, entries))
        return

    for entry in entries:
        yield format_entry(entry, args.long)


def main() -> None:
    """Main entry point for the fs-hospitality command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error or invalid pattern
        126: Permission denied
        141: Broken pipe
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        validate_args(args)

        if args.command == "conv-text-enc":
            convert_text_file(args)
            return

        if args.command == "detect-text-spec":
            lines = detect_text_spec_lines(args)
        else:
            lines = list_directory_lines(args)

        for line in lines:
            print(line)
        sys.stdout.flush()

    except BrokenPipeError:
        # Keep the interpreter from reporting the broken pipe again at shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except InvalidPatternError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(2)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
