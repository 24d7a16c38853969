from unittest.mock import patch

import pytest
import requests

from pyinit.errors import FetchError
from pyinit.gitignore import (
    IGNORE_URL,
    custom_ignore_options,
    get_ignore,
    get_list,
    make_ignore_file,
    print_list,
)

TEST_URL = "http://gitignore.test/api"


def make_response(status: int, body: bytes) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body
    return response


def test_get_list_returns_body_verbatim():
    list_data = b"macos,vscode,python,go,bash"
    with patch("pyinit.gitignore.requests.get", return_value=make_response(200, list_data)) as get:
        assert get_list(TEST_URL) == list_data
    get.assert_called_once()
    assert get.call_args.args[0] == f"{TEST_URL}/list"


def test_get_ignore_requests_joined_options():
    with patch("pyinit.gitignore.requests.get", return_value=make_response(200, b"*.pyc\n")) as get:
        assert get_ignore(["go", "python"], TEST_URL, timeout=3) == b"*.pyc\n"

    get.assert_called_once()
    url = get.call_args.args[0]
    assert url.startswith(f"{TEST_URL}/")
    options = url[len(TEST_URL) + 1:].split(",")
    assert sorted(options) == sorted(["go", "python", "macos", "windows"])
    assert get.call_args.kwargs["timeout"] == 3


def test_trailing_slash_in_base_url():
    with patch("pyinit.gitignore.requests.get", return_value=make_response(200, b"")) as get:
        get_list(TEST_URL + "/")
    assert get.call_args.args[0] == f"{TEST_URL}/list"


def test_default_url():
    with patch("pyinit.gitignore.requests.get", return_value=make_response(200, b"")) as get:
        get_list()
    assert get.call_args.args[0] == f"{IGNORE_URL}/list"


def test_error_status_raises_by_default():
    with patch("pyinit.gitignore.requests.get", return_value=make_response(404, b"not found")):
        with pytest.raises(FetchError) as excinfo:
            get_list(TEST_URL)
    assert excinfo.value.url == f"{TEST_URL}/list"


def test_error_status_ignored_when_lenient():
    with patch("pyinit.gitignore.requests.get", return_value=make_response(500, b"oops")):
        assert get_list(TEST_URL, check_status=False) == b"oops"


def test_network_error_is_wrapped():
    with patch("pyinit.gitignore.requests.get", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(FetchError, match="refused"):
            get_ignore([], TEST_URL)


def test_custom_ignore_options():
    assert custom_ignore_options(b"*.pyc\n") == b"*.pyc\n\n.idea/\n\n.vscode/\n"
    assert custom_ignore_options(b"", entries=()) == b""


def test_make_ignore_file_appends_extra_entries(tmp_path):
    body = b"# ignore\n*.pyc\n"
    with patch("pyinit.gitignore.requests.get", return_value=make_response(200, body)):
        path = make_ignore_file(["go"], TEST_URL, tmp_path)

    assert path == tmp_path / ".gitignore"
    data = path.read_bytes()
    assert data.startswith(body)
    assert data.endswith(b"\n.idea/\n\n.vscode/\n")
    assert data.split(b"\n")[-5:] == [b"", b".idea/", b"", b".vscode/", b""]


def test_make_ignore_file_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with patch("pyinit.gitignore.requests.get", return_value=make_response(200, b"*.log\n")):
        make_ignore_file([], TEST_URL)
    assert (tmp_path / ".gitignore").is_file()


def test_make_ignore_file_writes_nothing_on_fetch_error(tmp_path):
    with patch("pyinit.gitignore.requests.get", side_effect=requests.Timeout("timed out")):
        with pytest.raises(FetchError):
            make_ignore_file([], TEST_URL, tmp_path)
    assert not (tmp_path / ".gitignore").exists()


def test_print_list(capsys):
    with patch("pyinit.gitignore.requests.get", return_value=make_response(200, b"go,python")):
        print_list(TEST_URL)
    assert capsys.readouterr().out == "go,python\n"
