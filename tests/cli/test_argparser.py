"""Unit tests for the argument parser module in the fs-hospitality CLI."""

import argparse
from pathlib import Path

import pytest

from fs_hospitality.cli.argparser import create_parser, validate_args


@pytest.fixture
def parser():
    return create_parser()


def test_create_parser(parser):
    """Test that create_parser returns a properly configured parser."""
    assert isinstance(parser, argparse.ArgumentParser)
    assert parser.prog == "fs-hospitality"


def test_subcommand_required(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args([])
    assert excinfo.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("fs-hospitality ")


def test_detect_text_spec_defaults(parser):
    args = parser.parse_args(["detect-text-spec", "notes.txt"])
    assert args.command == "detect-text-spec"
    assert args.file == Path("notes.txt")
    assert args.type == "all"
    assert not args.verbose


def test_detect_text_spec_invalid_type(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["detect-text-spec", "notes.txt", "-T", "bom"])


def test_conv_text_enc_options(parser):
    args = parser.parse_args(["conv-text-enc", "in.txt", "out.txt", "-T", "end", "-E", "crlf", "-B", "-e", "utf-16-le"])
    assert args.file == Path("in.txt")
    assert args.dest == Path("out.txt")
    assert args.trim == "end"
    assert args.eol == "crlf"
    assert args.bom
    assert args.encoding == "utf-16-le"


def test_conv_text_enc_defaults(parser):
    args = parser.parse_args(["conv-text-enc", "in.txt"])
    assert args.dest is None
    assert args.trim is None
    assert args.eol is None
    assert not args.bom
    assert args.encoding == "utf-8"


def test_list_options(parser):
    args = parser.parse_args(
        ["-v", "list", "-f", "-S", "-m", r"\.py$", "-i", "test", "-l", "--concurrent", "-j", "4", "src"]
    )
    assert args.verbose
    assert args.directory == Path("src")
    assert args.only_files
    assert not args.only_dirs
    assert args.exclude_symlinks
    assert args.match == r"\.py$"
    assert args.ignore == "test"
    assert args.long
    assert args.concurrent
    assert args.jobs == 4
    validate_args(args)


def test_list_defaults(parser):
    args = parser.parse_args(["list", "."])
    assert not (args.only_dirs or args.only_files or args.exclude_symlinks)
    assert args.match is None
    assert args.ignore is None
    assert not (args.long or args.tree or args.concurrent)
    assert args.jobs is None
    validate_args(args)


@pytest.mark.parametrize(
    "argv,message",
    [
        (["list", "-d", "-f", "."], "mutually exclusive"),
        (["list", "-l", "--tree", "."], "mutually exclusive"),
        (["list", "-j", "2", "."], "requires --concurrent"),
        (["list", "--concurrent", "-j", "0", "."], "at least 1"),
    ],
)
def test_validate_args_rejects(parser, argv, message):
    args = parser.parse_args(argv)
    with pytest.raises(ValueError, match=message):
        validate_args(args)


def test_validate_args_ignores_other_commands(parser):
    validate_args(parser.parse_args(["detect-text-spec", "notes.txt"]))
