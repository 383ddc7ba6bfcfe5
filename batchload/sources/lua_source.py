"""Lua configuration scripts.

The script is executed in a fresh Lua runtime; every global it defines
becomes a top-level key of the document. Sequence tables (keys 1..n)
become lists, all other tables become dicts.
"""

from __future__ import annotations

from typing import Any

import lupa
from lupa import LuaRuntime

from batchload.models import DocumentFormat
from batchload.sources.base import BaseSource

MAX_DEPTH = 64


class LuaSource(BaseSource):
    format = DocumentFormat.LUA
    extensions = (".lua",)

    def parse(self, text: str) -> Any:
        lua = LuaRuntime(unpack_returned_tuples=True)
        env = lua.globals()
        builtins = set(env.keys())
        lua.execute(text)
        return {
            key: _to_python(value)
            for key, value in env.items()
            if key not in builtins
        }


def _to_python(value: Any, depth: int = 0) -> Any:
    if lupa.lua_type(value) != "table":
        return value
    if depth > MAX_DEPTH:
        raise ValueError(f"Lua tables nested deeper than {MAX_DEPTH} levels (self-referencing table?)")

    items = list(value.items())
    keys = [k for k, _ in items]
    if keys and all(isinstance(k, int) for k in keys) and sorted(keys) == list(range(1, len(keys) + 1)):
        return [_to_python(v, depth + 1) for _, v in sorted(items, key=lambda kv: kv[0])]
    return {k: _to_python(v, depth + 1) for k, v in items}
