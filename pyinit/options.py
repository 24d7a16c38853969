from typing import Iterable, List, Sequence

# Targets every generated .gitignore includes
DEFAULT_TARGETS = ("macos", "windows", "python")


def remove_duplicates(items: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def normalize_targets(items: Iterable[str]) -> List[str]:
    """Lowercase and strip target names, dropping blanks."""
    normalized = (item.strip().lower() for item in items)
    return [item for item in normalized if item]


def build_ignore_options(targets: Sequence[str], defaults: Sequence[str] = DEFAULT_TARGETS) -> str:
    """
    Merge the requested targets with the default set and return them as the
    comma separated option string the gitignore API expects.

    Requested targets come first, then any defaults not already requested.
    The API does not care about order.
    """
    combined = normalize_targets(list(targets) + list(defaults))
    return ",".join(remove_duplicates(combined))
