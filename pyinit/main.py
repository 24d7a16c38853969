from typing import List, NoReturn, Sequence
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
import argparse
import logging
import sys

from pyinit import __version__
from pyinit.config import Config, load_config
from pyinit.errors import PyinitError, UsageError
from pyinit.gitignore import make_ignore_file, print_list
from pyinit.io import write_text_file
from pyinit.messages import echo, error
from pyinit.template_store import render

VERSION_MESSAGE = f"version: {__version__}"

HELP_MESSAGE = """
Usage: pyinit [OPTIONS] [ARGS]...
CLI to generate gitignore files and other useful python files.
Options:
	--help     Display help message and exit.
	--version  Display version.
	--list     Display the valid gitignore.io API options.

	-a	   Create all of the files below
	-g	   Create .gitignore file with default language options (macos, windows, python)
	-f	   Create .flake8 file with default settings
	-l	   Create License file (MIT)
	-p	   Create pyproject.toml file with black formatter default settings for Python 3.8
	-d	   Create Dockerfile and .dockerignore files
Arguments:
	TARGETS: Space separated list of gitignore.io language options.	[optional]
Examples:
$ pyinit --help
$ pyinit -f -g -l -p go python java
"""

HELP_FLAGS = ("-h", "--help")

##################################################################################################
# Options
##################################################################################################

@dataclass
class Options:
    help: bool = False
    version: bool = False
    list_targets: bool = False
    all: bool = False
    flake8: bool = False
    gitignore: bool = False
    license: bool = False
    toml: bool = False
    docker: bool = False
    targets: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        flags = (self.help, self.version, self.list_targets, self.all, self.flake8,
                 self.gitignore, self.license, self.toml, self.docker)
        return not any(flags) and not self.targets

    @property
    def wants_gitignore(self) -> bool:
        # Targets on their own imply -g
        return self.all or self.gitignore or bool(self.targets)

    def static_files(self) -> List[str]:
        files = []
        if self.all or self.license: files.append("License")
        if self.all or self.flake8:  files.append(".flake8")
        if self.all or self.toml:    files.append("pyproject.toml")
        if self.all or self.docker:  files.extend(["Dockerfile", ".dockerignore"])
        return files


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="pyinit", add_help=False)
    parser.add_argument('-h', '--help', action='store_true')
    parser.add_argument('--version', action='store_true')
    parser.add_argument('--list', dest='list_targets', action='store_true')
    parser.add_argument('-a', dest='all', action='store_true')
    parser.add_argument('-f', dest='flake8', action='store_true')
    parser.add_argument('-g', dest='gitignore', action='store_true')
    parser.add_argument('-l', dest='license', action='store_true')
    parser.add_argument('-p', dest='toml', action='store_true')
    parser.add_argument('-d', dest='docker', action='store_true')
    parser.add_argument('targets', type=str, nargs='*')
    return parser


def parse_options(argv: Sequence[str]) -> Options:
    args = build_parser().parse_intermixed_args(list(argv))
    return Options(**vars(args))

##################################################################################################
# Dispatch
##################################################################################################

def create(filename: str, config: Config, directory: Path) -> Path:
    content = render(filename, year=date.today().year, author=config.author)
    return write_text_file(directory / filename, content)


def show_info(options: Options) -> int | None:
    """Handle the displays that need neither config nor network. Returns None otherwise."""
    if options.is_empty:
        echo(HELP_MESSAGE)
        return 1

    if options.help:
        echo(HELP_MESSAGE)
        return 0

    if options.version:
        echo(VERSION_MESSAGE)
        return 0

    return None


def run(options: Options, config: Config | None = None, directory: Path | None = None) -> int:
    code = show_info(options)
    if code is not None:
        return code

    config = config if config is not None else load_config()
    directory = directory if directory is not None else Path.cwd()

    if options.list_targets:
        print_list(config.api_url, timeout=config.timeout, check_status=config.check_status)
        return 0

    for filename in options.static_files():
        create(filename, config, directory)

    if options.wants_gitignore:
        make_ignore_file(
            options.targets,
            config.api_url,
            directory,
            defaults=config.default_targets,
            extra_entries=config.extra_ignore_entries,
            timeout=config.timeout,
            check_status=config.check_status,
        )

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # --help wins over everything else, including flags we don't know
    if any(arg in HELP_FLAGS for arg in argv):
        echo(HELP_MESSAGE)
        return 0

    try:
        options = parse_options(argv)
    except UsageError as e:
        error(str(e))
        echo(HELP_MESSAGE)
        return 1

    # A broken config file must not get in the way of --version
    code = show_info(options)
    if code is not None:
        return code

    try:
        config = load_config()
        logging.basicConfig(level=config.logging_level, format='%(message)s')
        return run(options, config)
    except PyinitError as e:
        error(f"Error: {e}")
        return 1


def entry_point() -> None:
    sys.exit(main())


if __name__ == '__main__':
    entry_point()
