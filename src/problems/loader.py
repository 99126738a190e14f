import json
import os
from typing import Any, Dict, List

import pandas as pd


def load_problems(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads problem records from a file. Handles .parquet, .json and .jsonl formats.
    Returns a list of raw record dictionaries.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    def _normalize_record(record: Dict[str, Any], position: int) -> Dict[str, Any]:
        if not record.get("id"):
            stem = os.path.splitext(os.path.basename(file_path))[0]
            record["id"] = f"{stem}-{position}"
        return record

    def _read_lines(f) -> List[Dict[str, Any]]:
        data = []
        for line in f:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(obj, dict):
                data.append(_normalize_record(obj, len(data)))
        return data

    # Case 1: Parquet File (Binary)
    if file_path.endswith(".parquet"):
        df = pd.read_parquet(file_path)
        records = df.to_dict(orient="records")
        return [_normalize_record(r, i) for i, r in enumerate(records)]

    # Case 2: JSON File (Text; array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            if isinstance(payload, list):
                records = [p for p in payload if isinstance(p, dict)]
                return [_normalize_record(r, i) for i, r in enumerate(records)]
            if isinstance(payload, dict):
                return [_normalize_record(payload, 0)]
            return []
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            with open(file_path, "r", encoding="utf-8") as f:
                return _read_lines(f)

    # Case 3: JSONL File (Text)
    with open(file_path, "r", encoding="utf-8") as f:
        return _read_lines(f)
