"""
FastAPI web server — JSON endpoint that lays out a categories document.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from venn_layout.pipeline.config import LAYOUT_RULES, ConfigError, LayoutRules, load_layout_rules
from venn_layout.pipeline.data import parse_venn_data, validate_venn_data
from venn_layout.pipeline.placer import optimize_layout, layout_to_dict


log = logging.getLogger(__name__)

RULES_ENV = "VENN_LAYOUT_RULES"


@lru_cache(maxsize=1)
def _rules() -> LayoutRules:
    """Layout rules, optionally overridden by the JSON file named in $VENN_LAYOUT_RULES."""
    path = os.environ.get(RULES_ENV)
    if path:
        log.info("Loading layout rules from %s", path)
        return load_layout_rules(path)
    return LAYOUT_RULES


# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="Venn Layout")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Models ─────────────────────────────────────────────────────────

class CategoryIn(BaseModel):
    name: str
    color: str = "#888888"
    x: float | None = None
    y: float | None = None
    r: float | None = None


class OrganizationIn(BaseModel):
    name: str
    categories: list[str] = []
    url: str | None = None
    careers: str | None = None


class LayoutRequest(BaseModel):
    categories: list[CategoryIn]
    organizations: list[OrganizationIn] = []


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/layout")
def layout(req: LayoutRequest, width: float | None = None, height: float | None = None):
    """Lay out the document and return circles, label anchors and dots."""
    data = parse_venn_data(req.model_dump())
    errors = validate_venn_data(data)
    if errors:
        raise HTTPException(422, detail=errors)

    try:
        rules = _rules()
    except ConfigError as exc:
        log.error("Layout rules unavailable: %s", exc)
        raise HTTPException(500, f"Layout rules unavailable: {exc}") from exc

    result = optimize_layout(data, rules=rules, width=width, height=height)
    return layout_to_dict(result)


def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("venn_layout.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
