import csv
import json

from label_finder.models import RepoAggregate
from label_finder.output import write_csv, write_json

RESULTS = (
    RepoAggregate(repo="a/b", count=2, url="https://github.com/a/b"),
    RepoAggregate(repo="c/d", count=1, url="https://github.com/c/d"),
)


def test_write_json(tmp_path):
    path = tmp_path / "nested" / "repos.json"
    write_json(path, RESULTS)
    assert json.loads(path.read_text()) == [
        {"repo": "a/b", "count": 2, "url": "https://github.com/a/b"},
        {"repo": "c/d", "count": 1, "url": "https://github.com/c/d"},
    ]


def test_write_csv(tmp_path):
    path = tmp_path / "repos.csv"
    write_csv(path, RESULTS)
    with path.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["repo"] for r in rows] == ["a/b", "c/d"]
    assert rows[0]["count"] == "2"


def test_write_csv_empty(tmp_path):
    path = tmp_path / "repos.csv"
    write_csv(path, ())
    assert path.read_text().strip() == "repo,count,url"
