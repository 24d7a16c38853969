import pytest

from pyinit.options import DEFAULT_TARGETS, build_ignore_options, normalize_targets, remove_duplicates


def tokens(options: str) -> list:
    return options.split(",")


def test_remove_duplicates_keeps_first_occurrence():
    assert remove_duplicates(["go", "python", "go", "java", "python"]) == ["go", "python", "java"]
    assert remove_duplicates([]) == []


def test_normalize_targets():
    assert normalize_targets([" Go ", "PYTHON", "", "   ", "rust"]) == ["go", "python", "rust"]


def test_empty_input_yields_defaults():
    assert sorted(tokens(build_ignore_options([]))) == sorted(DEFAULT_TARGETS)


def test_no_trailing_separator():
    options = build_ignore_options(["go"])
    assert not options.endswith(",")
    assert not options.startswith(",")


@pytest.mark.parametrize("targets", [
    [],
    ["go"],
    ["python", "python", "macos"],
    ["go", "java", "go", "", "Windows"],
    ["macos", "windows", "python"],
])
def test_options_are_unique_superset_of_defaults(targets):
    result = tokens(build_ignore_options(targets))
    assert len(result) == len(set(result))
    assert set(DEFAULT_TARGETS) <= set(result)
    assert set(normalize_targets(targets)) <= set(result)


def test_same_input_set_same_tokens():
    a = build_ignore_options(["go", "java", "rust"])
    b = build_ignore_options(["rust", "go", "java", "go"])
    assert set(tokens(a)) == set(tokens(b))


def test_custom_defaults():
    assert tokens(build_ignore_options(["go"], defaults=("macos", "windows"))) == ["go", "macos", "windows"]
    assert tokens(build_ignore_options(["go"], defaults=())) == ["go"]
