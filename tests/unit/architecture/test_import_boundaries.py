"""Tests for architecture import boundaries.

These tests ensure that the layer boundaries are maintained:
- Core layers (domain, application, infrastructure) must not import from CLI
- The domain layer must not depend on the application or infrastructure layers
"""

from __future__ import annotations

import ast
from pathlib import Path
import re

import pytest

# Root of the table_importer package
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent / "table_importer"
PACKAGE_NAME = PACKAGE_ROOT.name


def get_python_files(directory: Path) -> list[Path]:
    return list(directory.rglob("*.py"))


def _package_parts(file_path: Path) -> list[str]:
    return list(file_path.parent.relative_to(PACKAGE_ROOT.parent).parts)


def extract_imports_from_file(file_path: Path) -> list[str]:
    """Extract absolute module names imported by a Python file.

    Relative imports are resolved against the file's package.
    """
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    package_parts = _package_parts(file_path)
    imports: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            imports.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                base = package_parts[: len(package_parts) - (node.level - 1)]
                module = ".".join([*base, node.module] if node.module else base)
            else:
                module = node.module or ""
            imports.append(module)
            imports.extend(f"{module}.{alias.name}" for alias in node.names)
    return imports


def has_forbidden_import(imports: list[str], forbidden_pattern: str) -> list[str]:
    pattern = re.compile(forbidden_pattern)
    return [imp for imp in imports if pattern.search(imp)]


def _violations(layer: str, forbidden_pattern: str) -> list[str]:
    layer_dir = PACKAGE_ROOT / layer
    if not layer_dir.exists():
        pytest.skip(f"{layer} directory not found")
    violations: list[str] = []
    for py_file in get_python_files(layer_dir):
        forbidden = has_forbidden_import(
            extract_imports_from_file(py_file), forbidden_pattern
        )
        if forbidden:
            rel_path = py_file.relative_to(PACKAGE_ROOT.parent)
            violations.append(f"{rel_path}: {forbidden}")
    return violations


CLI_PATTERN = rf"^{PACKAGE_NAME}\.cli(\.|$)"


class TestCLIImportBoundary:
    """The CLI layer is the outermost layer; nothing else may import it."""

    @pytest.mark.parametrize("layer", ["domain", "application", "infrastructure"])
    def test_layer_does_not_import_cli(self, layer: str):
        violations = _violations(layer, CLI_PATTERN)

        assert not violations, f"{layer} layer imports CLI modules:\n" + "\n".join(
            violations
        )


class TestDomainIsolation:
    def test_domain_does_not_import_outer_layers(self):
        violations = _violations(
            "domain", rf"^{PACKAGE_NAME}\.(application|infrastructure)(\.|$)"
        )

        assert not violations, "Domain imports outer layers:\n" + "\n".join(
            violations
        )

    def test_domain_does_not_import_console_libraries(self):
        violations = _violations("domain", r"^(rich|click)(\.|$)")

        assert not violations, "Domain imports console libraries:\n" + "\n".join(
            violations
        )

    def test_application_does_not_import_infrastructure(self):
        violations = _violations(
            "application", rf"^{PACKAGE_NAME}\.infrastructure(\.|$)"
        )

        assert not violations, (
            "Application imports infrastructure:\n" + "\n".join(violations)
        )


class TestImportResolution:
    def test_relative_imports_are_resolved(self):
        imports = extract_imports_from_file(
            PACKAGE_ROOT / "infrastructure" / "container.py"
        )

        assert f"{PACKAGE_NAME}.application.table_import_use_case" in imports
        assert f"{PACKAGE_NAME}.infrastructure.io.binary_table_reader" in imports
