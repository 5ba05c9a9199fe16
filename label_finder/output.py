from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Iterable

from .models import RepoAggregate

FIELDNAMES = ["repo", "count", "url"]


def write_json(path: str | Path, results: Iterable[RepoAggregate]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps([r.to_dict() for r in results], indent=2) + "\n", encoding="utf-8")


def write_csv(path: str | Path, results: Iterable[RepoAggregate]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        for r in results:
            w.writerow(r.to_dict())
