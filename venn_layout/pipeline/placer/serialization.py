"""Layout serialization — JSON conversion."""

from __future__ import annotations

from venn_layout.pipeline.circles.models import Circle

from .models import PlacedCircle, PlacedOrganization, VennLayout


def layout_to_dict(layout: VennLayout) -> dict:
    """Serialize a VennLayout to a JSON-safe dict."""
    return {
        "method": layout.method,
        "circles": [
            {
                "index": pc.circle.index,
                "name": pc.circle.name,
                "color": pc.circle.color,
                "x": pc.circle.x,
                "y": pc.circle.y,
                "r": pc.circle.r,
                "label_x": pc.label_x,
                "label_y": pc.label_y,
                "label_angle": pc.label_angle,
            }
            for pc in layout.circles
        ],
        "organizations": [
            {
                "name": o.name,
                "categories": list(o.categories),
                "x": o.x,
                "y": o.y,
                **({"score": o.score} if o.score is not None else {}),
                **({"url": o.url} if o.url else {}),
                **({"careers": o.careers} if o.careers else {}),
            }
            for o in layout.organizations
        ],
        "stats": dict(layout.stats),
    }


def parse_layout(data: dict) -> VennLayout:
    """Parse a layout.json dict back into a VennLayout."""
    circles = [
        PlacedCircle(
            circle=Circle(
                index=c["index"],
                name=c["name"],
                color=c["color"],
                x=c["x"],
                y=c["y"],
                r=c["r"],
            ),
            label_x=c.get("label_x"),
            label_y=c.get("label_y"),
            label_angle=c.get("label_angle"),
        )
        for c in data["circles"]
    ]

    organizations = [
        PlacedOrganization(
            name=o["name"],
            categories=list(o["categories"]),
            x=o.get("x"),
            y=o.get("y"),
            score=o.get("score"),
            url=o.get("url"),
            careers=o.get("careers"),
        )
        for o in data["organizations"]
    ]

    return VennLayout(
        circles=circles,
        organizations=organizations,
        method=data.get("method", "sat"),
        stats=dict(data.get("stats", {})),
    )
