"""Command-line argument parsing for fs-hospitality.

This module defines the command-line interface for fs-hospitality,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from fs_hospitality import __version__
from fs_hospitality.text.trimming import TrimOption


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with fs-hospitality's subcommands.
    """
    description = """
    fs-hospitality: file-system utilities beyond basic read/write.

    Key Features:
    - Detects the character encoding and line endings of text files
    - Re-writes text files with another encoding, EOL style, BOM or trimmed lines
    - Lists directory trees recursively with type classification and filters
    """

    epilog = """
    Examples:
      # Show the encoding and EOL style of a file
      fs-hospitality detect-text-spec notes.txt

      # Convert a Shift_JIS file to UTF-8 with CRLF line endings and a BOM
      fs-hospitality conv-text-enc sjis.txt utf8.txt -E crlf -B -e utf-8

      # List every entry below a directory
      fs-hospitality list /path/to/project

      # List only text files, walking subdirectories concurrently
      fs-hospitality list -f -m '\\.txt$' --concurrent -j 8 /path/to/project

      # Show the directories as a tree
      fs-hospitality list -d --tree /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="fs-hospitality",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"fs-hospitality {__version__}", help="Show the version and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr.")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    detect = subparsers.add_parser("detect-text-spec", help="Detect the encoding and EOL style of a text file.")
    detect.add_argument("file", type=Path, help="The text file to inspect.")
    detect.add_argument(
        "-T",
        "--type",
        choices=["all", "encoding", "eol"],
        default="all",
        help="What to detect (default: all).",
    )

    convert = subparsers.add_parser("conv-text-enc", help="Re-write a text file with another encoding or EOL style.")
    convert.add_argument("file", type=Path, help="The text file to convert.")
    convert.add_argument(
        "dest", type=Path, nargs="?", help="Destination file. If not specified, the source is overwritten."
    )
    convert.add_argument(
        "-T", "--trim", choices=[option.value for option in TrimOption], help="Trim whitespace at every line."
    )
    convert.add_argument("-E", "--eol", help='Line-break style: "lf" | "cr" | "crlf" or "unix" | "mac" | "dos".')
    convert.add_argument("-B", "--bom", action="store_true", help="Add a BOM (UTF encodings only).")
    convert.add_argument(
        "-e", "--encoding", default="utf-8", help='Target encoding, e.g. "utf-16-be", "shift_jis" (default: utf-8).'
    )

    listing = subparsers.add_parser("list", help="List a directory tree recursively.")
    listing.add_argument("directory", type=Path, help="The directory to walk. Paths are printed relative to it.")
    listing.add_argument("-d", "--only-dirs", action="store_true", help="List directories only.")
    listing.add_argument("-f", "--only-files", action="store_true", help="List files and symlinks only.")
    listing.add_argument("-S", "--exclude-symlinks", action="store_true", help="Omit symbolic links.")
    listing.add_argument(
        "-m", "--match", metavar="REGEX", help="Keep only paths matching this case-insensitive regular expression."
    )
    listing.add_argument(
        "-i", "--ignore", metavar="REGEX", help="Drop paths matching this case-insensitive regular expression."
    )
    listing.add_argument("-l", "--long", action="store_true", help="Prefix every path with its entry type.")
    listing.add_argument("--tree", action="store_true", help="Print the result as a tree.")
    listing.add_argument(
        "--concurrent", action="store_true", help="Walk subdirectories concurrently. The output is identical."
    )
    listing.add_argument(
        "-j",
        "--jobs",
        type=int,
        metavar="N",
        help="Maximum number of directories listed at once with --concurrent (default: unbounded).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.command != "list":
        return
    if args.only_dirs and args.only_files:
        raise ValueError("-d/--only-dirs and -f/--only-files are mutually exclusive")
    if args.long and args.tree:
        raise ValueError("-l/--long and --tree are mutually exclusive")
    if args.jobs is not None:
        if not args.concurrent:
            raise ValueError("-j/--jobs requires --concurrent")
        if args.jobs < 1:
            raise ValueError("-j/--jobs must be at least 1")
