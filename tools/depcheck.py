from __future__ import annotations

import argparse
import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

SRC_DIR = Path(__file__).resolve().parents[1] / "src"

_FRAMEWORKS = frozenset(
    {
        "fastapi",
        "starlette",
        "sqlalchemy",
        "alembic",
        "psycopg",
        "httpx",
        "requests",
        "opentelemetry",
    }
)

# forbidden import prefixes per layer; inner layers know nothing of outer ones
LAYER_RULES: dict[str, frozenset[str]] = {
    "domain": _FRAMEWORKS
    | {"pydantic", "prometheus_client", "roa.application", "roa.api", "roa.infrastructure"},
    "application": _FRAMEWORKS | {"roa.api", "roa.infrastructure", "roa.client"},
}

DEFAULT_PATHS = {layer: SRC_DIR / "roa" / layer for layer in LAYER_RULES}


@dataclass(frozen=True)
class Violation:
    file_path: Path
    line: int
    module: str
    layer: str


def _python_files(root: Path) -> Iterable[Path]:
    if root.is_file() and root.suffix == ".py":
        yield root
        return
    if root.is_dir():
        yield from sorted(root.rglob("*.py"))


def _is_forbidden(module: str, forbidden: frozenset[str]) -> bool:
    return any(module == prefix or module.startswith(f"{prefix}.") for prefix in forbidden)


def _imported_modules(tree: ast.AST) -> Iterable[tuple[int, str]]:
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield node.lineno, alias.name
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            yield node.lineno, node.module


def scan(path: Path, layer: str) -> list[Violation]:
    forbidden = LAYER_RULES[layer]
    violations: list[Violation] = []
    for file_path in _python_files(path):
        tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
        violations.extend(
            Violation(file_path=file_path, line=line, module=module, layer=layer)
            for line, module in _imported_modules(tree)
            if _is_forbidden(module, forbidden)
        )
    return violations


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Layer import policy for src/roa/domain and src/roa/application."
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Path to scan (repeatable). Defaults to every layer under src/roa.",
    )
    parser.add_argument(
        "--layer",
        choices=sorted(LAYER_RULES),
        default="domain",
        help="Rules applied to --path arguments (default: domain).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.path:
        targets = [(Path(item), args.layer) for item in args.path]
    else:
        targets = [(path, layer) for layer, path in DEFAULT_PATHS.items()]

    violations = [violation for path, layer in targets for violation in scan(path, layer)]
    if not violations:
        print("depcheck passed")
        return 0

    print("depcheck failed: forbidden imports detected")
    for violation in violations:
        print(f"{violation.file_path}:{violation.line} [{violation.layer}] -> {violation.module}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
