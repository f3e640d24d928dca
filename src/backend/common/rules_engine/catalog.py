from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .models import RuleCatalog
from .registry import registry
from .ruleset import DEFAULT_CATALOG

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    rule_id: str
    rule_title: str
    section_id: str
    subsection_id: str
    severity: str
    handbook_refs: List[str] = Field(default_factory=list)
    context: Dict[str, List[str]] = Field(default_factory=dict)

    # Empty when no heuristic is registered for the rule id.
    module: str = ""
    class_name: str = ""


def build_catalog(catalog: Optional[RuleCatalog] = None) -> List[RuleCatalogEntry]:
    catalog = catalog or DEFAULT_CATALOG
    entries: List[RuleCatalogEntry] = []
    for section in catalog.sections:
        for subsection in section.subsections:
            for rule in subsection.rules:
                rule_cls = registry.heuristic_for(rule.id)
                entries.append(
                    RuleCatalogEntry(
                        rule_id=rule.id,
                        rule_title=rule.title,
                        section_id=section.id,
                        subsection_id=subsection.id,
                        severity=rule.severity.value,
                        handbook_refs=list(rule.handbook_refs),
                        context={k: list(v) for k, v in rule.context.dimensions().items()} if rule.context else {},
                        module=getattr(rule_cls, "__module__", "") if rule_cls else "",
                        class_name=getattr(rule_cls, "__name__", "") if rule_cls else "",
                    )
                )
    return entries


def load_catalog(path: Path) -> RuleCatalog:
    """Load a catalog from a JSON or YAML file with the same shape as the built-in ruleset."""
    raw_text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        raw = _yaml().safe_load(raw_text)
    else:
        raw = json.loads(raw_text)
    if not isinstance(raw, dict):
        raise ValueError(f"Catalog file must contain an object: {path}")
    return RuleCatalog.model_validate(raw)


def _yaml():
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as exc:
        raise SystemExit(
            "PyYAML is required for YAML catalogs. Install it in your backend venv (e.g., `pip install pyyaml`)."
        ) from exc
    return yaml


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True, ensure_ascii=False)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    return _yaml().safe_dump(catalog, sort_keys=True, allow_unicode=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the rule catalog with the heuristic registered per rule.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Optional JSON/YAML catalog file (defaults to the built-in ruleset).",
    )
    args = parser.parse_args(argv)

    source = load_catalog(Path(args.catalog)) if args.catalog else None
    catalog = [e.model_dump() for e in build_catalog(source)]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
