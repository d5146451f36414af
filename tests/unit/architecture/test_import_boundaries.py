"""Tests for architecture import boundaries.

These tests keep the layering intact:
- domain depends on nothing outside itself (plus pandas and the shared
  constants/helpers)
- application does not reach into infrastructure or the CLI
- nothing outside the CLI imports the CLI
"""

from __future__ import annotations

import ast
from pathlib import Path
import re

# Root of the dm_transpiler package
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent / "dm_transpiler"


def get_python_files(directory: Path) -> list[Path]:
    return list(directory.rglob("*.py"))


def extract_imports_from_file(file_path: Path) -> list[str]:
    """Extract imported module names, resolving relative imports.

    Args:
        file_path: Path to Python file

    Returns:
        List of dotted module names
    """
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    package_parts = list(file_path.relative_to(PACKAGE_ROOT.parent).parent.parts)
    imports: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            imports.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                base = package_parts[: len(package_parts) - node.level + 1]
                module = ".".join([*base, node.module] if node.module else base)
            else:
                module = node.module or ""
            imports.append(module)
    return imports


def find_violations(directory: Path, forbidden_pattern: str) -> list[str]:
    pattern = re.compile(forbidden_pattern)
    violations = []
    for py_file in get_python_files(directory):
        forbidden = [
            imp for imp in extract_imports_from_file(py_file) if pattern.search(imp)
        ]
        if forbidden:
            rel_path = py_file.relative_to(PACKAGE_ROOT.parent)
            violations.append(f"{rel_path}: {forbidden}")
    return violations


class TestDomainBoundary:
    def test_domain_does_not_import_outer_layers(self):
        violations = find_violations(
            PACKAGE_ROOT / "domain",
            r"^dm_transpiler\.(application|infrastructure|cli)(\.|$)",
        )

        assert not violations, "Domain layer imports outer layers:\n" + "\n".join(
            violations
        )

    def test_domain_does_not_import_rich(self):
        violations = find_violations(PACKAGE_ROOT / "domain", r"^rich(\.|$)")

        assert not violations, "Domain layer imports rich:\n" + "\n".join(violations)


class TestApplicationBoundary:
    def test_application_does_not_import_infrastructure_or_cli(self):
        violations = find_violations(
            PACKAGE_ROOT / "application",
            r"^dm_transpiler\.(infrastructure|cli)(\.|$)",
        )

        assert not violations, (
            "Application layer imports infrastructure or CLI:\n"
            + "\n".join(violations)
        )


class TestCLIImportBoundary:
    def test_infrastructure_does_not_import_cli(self):
        violations = find_violations(
            PACKAGE_ROOT / "infrastructure", r"^dm_transpiler\.cli(\.|$)"
        )

        assert not violations, (
            "Infrastructure layer imports CLI modules:\n" + "\n".join(violations)
        )


def test_relative_imports_are_resolved():
    file_path = PACKAGE_ROOT / "domain" / "services" / "dm_transformer.py"

    imports = extract_imports_from_file(file_path)

    assert "dm_transpiler.domain.entities.diagnostics" in imports
    assert "dm_transpiler.constants" in imports
