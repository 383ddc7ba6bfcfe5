"""FastAPI routes for resolving posted object tables."""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from batchload.graph import (
    build_dependency_map,
    build_reverse_graph,
    decode_declarations,
    transitive_reduce,
)
from batchload.pipeline import resolve
from batchload.report import graph_to_dict, result_to_dict
from batchload.sources import DocumentError, get_table

router = APIRouter(prefix="/api")


# --- Request models ---

class ResolveRequest(BaseModel):
    document: dict[str, Any]
    table: str = "objects"
    reduce: bool = True


class GraphRequest(BaseModel):
    document: dict[str, Any]
    table: str = "objects"
    raw: bool = False


# --- Endpoints ---

@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/resolve")
async def resolve_document(req: ResolveRequest):
    try:
        result = await asyncio.to_thread(resolve, req.document, req.table, reduce=req.reduce)
    except DocumentError as e:
        raise HTTPException(400, str(e))
    return result_to_dict(result)


def _reverse_graph(document: dict[str, Any], table: str, raw: bool) -> dict[str, set[str]]:
    declarations, _ = decode_declarations(get_table(document, table))
    graph = build_reverse_graph(build_dependency_map(declarations))
    return graph if raw else transitive_reduce(graph)


@router.post("/graph")
async def reverse_graph(req: GraphRequest):
    try:
        graph = await asyncio.to_thread(_reverse_graph, req.document, req.table, req.raw)
    except DocumentError as e:
        raise HTTPException(400, str(e))
    return {"table": req.table, "graph": graph_to_dict(graph)}
