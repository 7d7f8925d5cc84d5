"""Input document parsing — convert raw dicts/JSON into VennData."""

from __future__ import annotations

import json
from pathlib import Path

from .models import Category, Organization, VennData, DataError


def parse_venn_data(data: dict) -> VennData:
    """Parse a raw dict (from data.json / request body) into VennData.

    Field types are checked here; cross-references (unknown categories,
    duplicate names) are left to ``validate_venn_data``.
    """
    if not isinstance(data, dict):
        raise DataError("Malformed data document: expected a JSON object")
    try:
        categories = [
            _parse_category(i, c) for i, c in enumerate(_list(data["categories"], "categories"))
        ]
        organizations = [
            _parse_organization(i, o)
            for i, o in enumerate(_list(data.get("organizations", []), "organizations"))
        ]
    except KeyError as exc:
        raise DataError(f"Malformed data document: missing field {exc}") from exc

    return VennData(categories=categories, organizations=organizations)


def _parse_category(i: int, c: dict) -> Category:
    where = f"categories[{i}]"
    c = _object(c, where)
    return Category(
        name=_str(c["name"], f"{where}.name"),
        color=_str(c.get("color", "#888888"), f"{where}.color"),
        x=_opt_number(c.get("x"), f"{where}.x"),
        y=_opt_number(c.get("y"), f"{where}.y"),
        r=_opt_number(c.get("r"), f"{where}.r"),
    )


def _parse_organization(i: int, o: dict) -> Organization:
    where = f"organizations[{i}]"
    o = _object(o, where)
    cats = _list(o.get("categories", []), f"{where}.categories")
    return Organization(
        name=_str(o["name"], f"{where}.name"),
        categories=[_str(c, f"{where}.categories[{j}]") for j, c in enumerate(cats)],
        url=_opt_str(o.get("url"), f"{where}.url"),
        careers=_opt_str(o.get("careers"), f"{where}.careers"),
    )


# ── Field checks ───────────────────────────────────────────────────

def _object(value, where: str) -> dict:
    if not isinstance(value, dict):
        raise DataError(f"{where}: expected an object, got {value!r}")
    return value


def _list(value, where: str) -> list:
    if not isinstance(value, list):
        raise DataError(f"{where}: expected a list, got {value!r}")
    return value


def _str(value, where: str) -> str:
    if not isinstance(value, str):
        raise DataError(f"{where}: expected a string, got {value!r}")
    return value


def _opt_str(value, where: str) -> str | None:
    return None if value is None else _str(value, where)


def _opt_number(value, where: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataError(f"{where}: expected a number, got {value!r}")
    return float(value)


def load_venn_data(path: str | Path) -> VennData:
    """Read and parse a data.json file."""
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DataError(f"{p}: parse error: {exc}") from exc
    except OSError as exc:
        raise DataError(f"{p}: read error: {exc}") from exc
    return parse_venn_data(raw)
