"""Structured diagnostics for sentences that lose variants during expansion."""
from __future__ import annotations

import json
import time
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from .models import ExpansionEvent


class DiagnosticLogger:
    """Writes expansion events to JSONL for later inspection."""

    def __init__(self, path: Optional[Path]) -> None:
        self.path = path
        if path:
            path.parent.mkdir(parents=True, exist_ok=True)

    def __call__(self, event: ExpansionEvent) -> None:
        self.emit(event)

    def emit(self, event: ExpansionEvent) -> None:
        if not self.path:
            return
        payload = asdict(event)
        payload["timestamp"] = time.time()
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload))
            handle.write("\n")


class DiagnosticCollector:
    """Keeps expansion events in memory, optionally forwarding them to a logger."""

    def __init__(self, logger: Optional[DiagnosticLogger] = None) -> None:
        self.events: List[ExpansionEvent] = []
        self.logger = logger

    def __call__(self, event: ExpansionEvent) -> None:
        self.events.append(event)
        if self.logger:
            self.logger.emit(event)

    def count(self, kind: str) -> int:
        return sum(1 for event in self.events if event.kind == kind)
