"""Parquet export of augmented intents as a flat training table."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping

import pyarrow as pa
import pyarrow.parquet as pq

from common.models import Intent
from common.text import sentence_text

TRAINING_SCHEMA = pa.schema(
    [
        ("intent", pa.string()),
        ("sentence_index", pa.int64()),
        ("text", pa.string()),
    ]
)


def training_rows(intents: Mapping[str, Intent]) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for name, intent in intents.items():
        for index, sentence in enumerate(intent.data):
            rows.append({"intent": name, "sentence_index": index, "text": sentence_text(sentence)})
    return rows


def write_training_table(intents: Mapping[str, Intent], path: Path) -> int:
    """Write one row per augmented sentence and return the row count."""

    rows = training_rows(intents)
    columns = {name: [row[name] for row in rows] for name in TRAINING_SCHEMA.names}
    table = pa.table(columns, schema=TRAINING_SCHEMA)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, path)
    return len(rows)
