"""Import boundaries of the date core.

The ``dates`` package must stay free of settings and logging configuration:
only the CLI resolves settings and configures structlog.
"""

import ast
from pathlib import Path

import pytest

import opal_downloader.dates

DATES_DIR = Path(opal_downloader.dates.__file__).parent
FORBIDDEN_PREFIXES = ("opal_downloader.config", "opal_downloader.utils")


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            modules.add(node.module)
    return modules


@pytest.mark.unit
@pytest.mark.parametrize(
    "module_path", sorted(DATES_DIR.glob("*.py")), ids=lambda path: path.name
)
def test_dates_does_not_import_config_or_logging_setup(module_path: Path) -> None:
    offending = {
        name
        for name in _imported_modules(module_path)
        if name.startswith(FORBIDDEN_PREFIXES)
    }
    assert offending == set()
