"""JSON persistence helpers for parsed-data trees and augmented intents."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from common.errors import BackendError, ErrorCode


def load_parsed_data(path: Path, *, encoding: str = "utf-8") -> Dict[str, Any]:
    try:
        with path.open("r", encoding=encoding) as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise BackendError(ErrorCode.IO_ERROR, f"Input file '{path}' not found") from exc
    except json.JSONDecodeError as exc:
        raise BackendError(ErrorCode.IO_ERROR, f"Input file '{path}' is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise BackendError(ErrorCode.IO_ERROR, f"Input file '{path}' must contain a JSON object")
    return data


def save_augmented_data(
    parsed_data: Mapping[str, Any],
    intents: Mapping[str, Any],
    path: Path,
    *,
    encoding: str = "utf-8",
) -> None:
    """Write the parsed tree back with its intents replaced by the augmented ones."""

    payload = {**parsed_data, "intents": dict(intents)}
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding=encoding)
