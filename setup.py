from setuptools import setup, find_packages
from pathlib import Path

# Read the requirements from requirements.txt
reqs_path = Path(__file__).parent / "requirements.txt"
requirements = [
    line.strip()
    for line in reqs_path.read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="pyinit",
    version="0.0.1",
    description="Generate .gitignore and other boilerplate files for Python projects",
    packages=find_packages(),
    package_data={"pyinit": ["files/*"]},
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "pyinit = pyinit.main:entry_point",
        ],
    },
)
