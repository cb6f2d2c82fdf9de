"""Static check of the import boundaries between CONCOURSE modules.

Parses the package sources with `ast` (nothing is imported), resolves every
absolute and relative import that targets another ``concourse.<module>``, and
reports:

- imports the rule table does not allow (e.g. ``seat`` importing ``baggage``);
- import cycles between top-level modules.

Only top-level modules matter: ``concourse.seat.manager`` belongs to ``seat``.
Modules missing from the rule table may import nothing from the package.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_FEATURE_MODULES = frozenset(
    {"seat", "baggage", "login_api", "login", "home", "passenger", "flightlist"}
)

# module -> modules it may import. The kernel is open to every module.
DEFAULT_RULES: Mapping[str, frozenset[str]] = {
    "interfaces": frozenset(),
    "seat": frozenset({"interfaces"}),
    "baggage": frozenset({"interfaces"}),
    "passenger": frozenset({"interfaces"}),
    "flightlist": frozenset({"interfaces"}),
    "login_api": frozenset({"interfaces"}),
    "login": frozenset({"interfaces", "login_api"}),
    "home": frozenset({"interfaces", "login_api"}),
    "adapters": frozenset({"interfaces"}) | _FEATURE_MODULES,
    "config": frozenset({"interfaces"}) | _FEATURE_MODULES,
    "bootstrap": frozenset({"interfaces", "adapters", "config"}) | _FEATURE_MODULES,
    "logging": frozenset(),
    "boundaries": frozenset(),
    "entrypoints": frozenset(
        {"bootstrap", "boundaries", "config", "interfaces", "logging"}
    ),
}


@dataclass(frozen=True, slots=True)
class ImportEdge:
    """An import of `target` found in `path` at `lineno`."""

    source: str
    target: str
    path: Path
    lineno: int


@dataclass(frozen=True, slots=True)
class BoundaryViolation:
    """A disallowed import, or a cycle if `cycle` is set."""

    message: str
    edge: ImportEdge | None = None
    cycle: tuple[str, ...] = ()

    def __str__(self) -> str:
        if self.edge is not None:
            return f"{self.edge.path}:{self.edge.lineno}: {self.message}"
        return self.message


def _module_name(package_root: Path, path: Path) -> str:
    parts = list(path.relative_to(package_root).with_suffix("").parts)
    if parts[-1] == "__init__":
        parts.pop()
    return ".".join([package_root.name, *parts])


def _resolve_relative(module: str, is_package: bool, level: int, target: str | None) -> str:
    base = module.split(".")
    if not is_package:
        base = base[:-1]
    if level > 1:
        base = base[: len(base) - (level - 1)]
    return ".".join(base + ([target] if target else []))


def _is_submodule(package_root: Path, name: str) -> bool:
    return (package_root / name).is_dir() or (package_root / f"{name}.py").is_file()


def _top_level(dotted: str, package: str) -> str | None:
    parts = dotted.split(".")
    if parts[0] != package or len(parts) < 2:
        return None
    return parts[1]


def iter_import_edges(package_root: Path) -> Iterator[ImportEdge]:
    """Yield the imports between top-level modules of the package at `package_root`.

    Imports inside the same top-level module are skipped.
    """
    package = package_root.name
    for path in sorted(package_root.rglob("*.py")):
        module = _module_name(package_root, path)
        source = _top_level(module, package)
        if source is None:
            continue  # the package __init__
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            targets: list[str] = []
            if isinstance(node, ast.Import):
                targets = [alias.name for alias in node.names]
            elif isinstance(node, ast.ImportFrom):
                if node.level:
                    resolved = _resolve_relative(
                        module, path.name == "__init__.py", node.level, node.module
                    )
                else:
                    resolved = node.module or ""
                # ``from concourse import seat`` names the submodule in the alias
                if resolved == package:
                    targets = [
                        f"{package}.{alias.name}"
                        for alias in node.names
                        if _is_submodule(package_root, alias.name)
                    ]
                else:
                    targets = [resolved]
            for dotted in targets:
                target = _top_level(dotted, package)
                if target is not None and target != source:
                    yield ImportEdge(source, target, path, node.lineno)


def find_cycles(edges: Mapping[str, set[str]]) -> list[tuple[str, ...]]:
    """Return one representative path for each import cycle in `edges`."""
    cycles: list[tuple[str, ...]] = []
    seen: set[frozenset[str]] = set()
    visiting: list[str] = []
    done: set[str] = set()

    def visit(node: str) -> None:
        if node in done:
            return
        if node in visiting:
            cycle = tuple(visiting[visiting.index(node):]) + (node,)
            if (key := frozenset(cycle)) not in seen:
                seen.add(key)
                cycles.append(cycle)
            return
        visiting.append(node)
        for target in sorted(edges.get(node, ())):
            visit(target)
        visiting.pop()
        done.add(node)

    for node in sorted(edges):
        visit(node)
    return cycles


def check_boundaries(
    package_root: Path, rules: Mapping[str, frozenset[str]] = DEFAULT_RULES
) -> list[BoundaryViolation]:
    """Check the package at `package_root` against `rules`.

    Returns:
        The violations found; empty when every boundary holds.
    """
    violations: list[BoundaryViolation] = []
    graph: dict[str, set[str]] = {}
    for edge in iter_import_edges(package_root):
        graph.setdefault(edge.source, set()).add(edge.target)
        if edge.target not in rules.get(edge.source, frozenset()):
            violations.append(
                BoundaryViolation(
                    f"'{edge.source}' must not import '{edge.target}'", edge=edge
                )
            )
    for cycle in find_cycles(graph):
        violations.append(
            BoundaryViolation("import cycle: " + " -> ".join(cycle), cycle=cycle)
        )
    logger.debug(
        "Checked %d module(s) under %s: %d violation(s)",
        len(graph),
        package_root,
        len(violations),
    )
    return violations


def default_package_root() -> Path:
    """Return the directory of the installed `concourse` package."""
    return Path(__file__).resolve().parent
