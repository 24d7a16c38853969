"""
Client for the gitignore.io API (https://www.toptal.com/developers/gitignore).

    GET <base>/<comma separated targets>   -> .gitignore text for those targets
    GET <base>/list                         -> comma/newline separated list of valid targets
"""

import logging
from pathlib import Path
from typing import Sequence

import requests

from pyinit.errors import FetchError
from pyinit.io import write_file
from pyinit.messages import echo
from pyinit.options import DEFAULT_TARGETS, build_ignore_options

logger = logging.getLogger(__name__)

IGNORE_URL = "https://www.toptal.com/developers/gitignore/api"
DEFAULT_TIMEOUT = 10.0

# Directories appended to every generated .gitignore
EXTRA_IGNORE_ENTRIES = (".idea", ".vscode")

IGNORE_FILENAME = ".gitignore"


def _get(url: str, timeout: float | None, check_status: bool) -> bytes:
    logger.debug("GET %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e

    logger.debug("%s responded with %s (%d bytes)", url, response.status_code, len(response.content))

    if check_status:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(url, f"HTTP {response.status_code}") from e

    return response.content


def get_ignore(
    targets: Sequence[str],
    url: str = IGNORE_URL,
    *,
    defaults: Sequence[str] = DEFAULT_TARGETS,
    timeout: float | None = DEFAULT_TIMEOUT,
    check_status: bool = True,
) -> bytes:
    """Fetch the .gitignore body for `targets` merged with `defaults`."""
    options = build_ignore_options(targets, defaults)
    return _get("/".join([url.rstrip("/"), options]), timeout, check_status)


def get_list(
    url: str = IGNORE_URL,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    check_status: bool = True,
) -> bytes:
    return _get("/".join([url.rstrip("/"), "list"]), timeout, check_status)


def custom_ignore_options(data: bytes, entries: Sequence[str] = EXTRA_IGNORE_ENTRIES) -> bytes:
    """Append each entry as an ignored directory on its own line."""
    for entry in entries:
        data += ("\n" + entry + "/\n").encode("utf-8")
    return data


def make_ignore_file(
    targets: Sequence[str],
    url: str = IGNORE_URL,
    directory: Path | None = None,
    *,
    defaults: Sequence[str] = DEFAULT_TARGETS,
    extra_entries: Sequence[str] = EXTRA_IGNORE_ENTRIES,
    timeout: float | None = DEFAULT_TIMEOUT,
    check_status: bool = True,
) -> Path:
    data = get_ignore(targets, url, defaults=defaults, timeout=timeout, check_status=check_status)
    data = custom_ignore_options(data, extra_entries)

    directory = directory if directory is not None else Path.cwd()
    return write_file(directory / IGNORE_FILENAME, data)


def print_list(
    url: str = IGNORE_URL,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    check_status: bool = True,
) -> None:
    data = get_list(url, timeout=timeout, check_status=check_status)
    echo(data.decode("utf-8", errors="replace"))
