# io/poly_format.py
"""
Reader/writer for the ``.poly`` point/edge text files.

Two dialects exist in the wild:

tabular::

    10  2  0  1          <- point header: count, dims, attrs, markers
    0   600 500          <- id x y
    13  1                <- edge header: count, markers
    0   0  1  0          <- edge_id from to marker

labeled::

    id: 0 x: 600 y: 500
    id_vertice: 0 de: 0 para: 1 ignorar: 0

Header counts are informational only; the shipped labeled sample declares
fewer edges than it lists.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Literal

from polypath.domain.entities.geography import Edge, Point
from polypath.errors import PolyFormatError

Dialect = Literal["auto", "tabular", "labeled"]

_NUM = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"

_TAB_POINTS_HEADER = re.compile(r"^(\d+)\s+2\s+0\s+1$")
_TAB_EDGES_HEADER = re.compile(r"^(\d+)\s+1$")
_TAB_POINT = re.compile(rf"^(\d+)\s+({_NUM})\s+({_NUM})$")
_TAB_EDGE = re.compile(r"^(\d+)\s+(\d+)\s+(\d+)\s+\d+$")

_LAB_POINT = re.compile(rf"id:\s*(\d+)\s*x:\s*({_NUM})\s*y:\s*({_NUM})")
_LAB_EDGE = re.compile(r"id_vertice:\s*\d+\s*de:\s*(\d+)\s*para:\s*(\d+)")


@dataclass
class PolyGraph:
    points: list[Point] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def point_ids(self) -> list[int]:
        return [p.id for p in self.points]


def detect_dialect(text: str) -> Dialect:
    return "labeled" if ("id:" in text or "id_vertice:" in text) else "tabular"


def _parse_tabular(lines: list[str]) -> PolyGraph:
    g = PolyGraph()
    section = None
    for line in lines:
        # an edge row such as "5 2 0 1" looks like a points header
        if section != "edges" and _TAB_POINTS_HEADER.match(line):
            section = "points"
            continue
        if _TAB_EDGES_HEADER.match(line):
            section = "edges"
            continue
        if section == "points":
            m = _TAB_POINT.match(line)
            if m:
                g.points.append(Point(int(m[1]), float(m[2]), float(m[3])))
        elif section == "edges":
            m = _TAB_EDGE.match(line)
            if m:
                g.edges.append(Edge(int(m[2]), int(m[3])))
    return g


def _parse_labeled(lines: list[str]) -> PolyGraph:
    g = PolyGraph()
    for line in lines:
        if m := _LAB_POINT.search(line):
            g.points.append(Point(int(m[1]), float(m[2]), float(m[3])))
        elif m := _LAB_EDGE.search(line):
            g.edges.append(Edge(int(m[1]), int(m[2])))
    return g


def parse_poly(text: str, dialect: Dialect = "auto") -> PolyGraph:
    """Parse ``.poly`` text. Lines that match nothing are ignored.

    Raises PolyFormatError when no point could be read.
    """
    if dialect == "auto":
        dialect = detect_dialect(text)
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    if dialect == "tabular":
        g = _parse_tabular(lines)
    elif dialect == "labeled":
        g = _parse_labeled(lines)
    else:
        raise ValueError(f"Unknown dialect {dialect!r}")
    if not g.points:
        raise PolyFormatError(f"no points found ({dialect} dialect)")
    return g


def read_poly(path: str | os.PathLike, dialect: Dialect = "auto") -> PolyGraph:
    with open(path, encoding="utf-8") as fp:
        try:
            text = fp.read()
        except UnicodeDecodeError as exc:
            raise PolyFormatError(f"{os.fspath(path)} is not UTF-8 text: {exc.reason}") from exc
    return parse_poly(text, dialect)


def _num(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else repr(float(v))


def format_poly(graph: PolyGraph) -> str:
    """Serialize to the tabular dialect (tab separated, trailing newline)."""
    out = [f"{len(graph.points)}\t2\t0\t1"]
    out += [f"{p.id}\t{_num(p.x)}\t{_num(p.y)}" for p in graph.points]
    out.append(f"{len(graph.edges)}\t1")
    out += [f"{i}\t{e.source}\t{e.target}\t0" for i, e in enumerate(graph.edges)]
    return "\n".join(out) + "\n"


SAMPLE_POLY = """\
10\t2\t0\t1
0\t600\t500
1\t1070\t650
2\t1187\t868
3\t1023\t875
4\t968\t868
5\t905\t853
6\t852\t833
7\t832\t823
8\t715\t775
9\t628\t714
13\t1
0\t0\t1\t0
1\t0\t9\t0
2\t9\t8\t0
3\t8\t7\t0
4\t7\t6\t0
5\t6\t5\t0
6\t5\t4\t0
7\t4\t3\t0
8\t3\t2\t0
9\t2\t1\t0
10\t8\t1\t0
11\t6\t1\t0
12\t5\t1\t0
"""


def sample_graph() -> PolyGraph:
    return parse_poly(SAMPLE_POLY, "tabular")
