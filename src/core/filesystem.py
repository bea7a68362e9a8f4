"""Filesystem helpers for record exports and rendered charts."""

from __future__ import annotations
import json
import os
from typing import Any


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def ensure_parent(path: str) -> None:
    dir_part = os.path.dirname(path)
    if dir_part:
        ensure_dir(dir_part)


def write_text(path: str, content: str, encoding: str = "utf-8") -> None:
    ensure_parent(path)
    with open(path, "w", encoding=encoding) as fh:
        fh.write(content)


def read_text(path: str, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding) as fh:
        return fh.read()


def read_json(path: str) -> Any:
    return json.loads(read_text(path))


def write_json(path: str, payload: Any) -> None:
    write_text(path, json.dumps(payload, indent=2, ensure_ascii=False) + "\n")
