from importlib import resources
from types import MappingProxyType
from typing import Any, List, Mapping

import jinja2

from pyinit.errors import TemplateNotFoundError

# Desired output filename -> bundled resource under pyinit/files/.
# Resources are stored without a leading dot so packaging tools don't skip them.
FILE_MAP: Mapping[str, str] = MappingProxyType({
    ".flake8":        "flake8",
    "License":        "License.jinja2",
    "pyproject.toml": "pyproject.toml",
    ".dockerignore":  "dockerignore",
    "Dockerfile":     "Dockerfile",
})


def available_templates() -> List[str]:
    return sorted(FILE_MAP)


def read_resource(name: str) -> str:
    return resources.files("pyinit").joinpath("files").joinpath(name).read_text(encoding="utf-8")


def get_template(filename: str) -> jinja2.Template:
    name = FILE_MAP.get(filename)
    if name is None:
        raise TemplateNotFoundError(filename)

    try:
        source = read_resource(name)
    except FileNotFoundError as e:
        raise TemplateNotFoundError(filename) from e

    return jinja2.Template(source)


def render(filename: str, **context: Any) -> str:
    result = get_template(filename).render(**context)
    result = result.rstrip() + "\n"
    return result
