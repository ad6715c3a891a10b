import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

HEADER = ["ID", "Gene.symbol", "adj.P.Val", "logFC", "Gene.title"]

SCENARIO_ROWS = [
    ("A1", "TP53", 0.01, 2.0, "tumor protein"),
    ("A2", "", 0.01, 3.0, ""),
    ("A3", "FOO///BAR", 0.01, 1.5, "x"),
    ("A4", "ACT1", 0.2, 1.2, "actin"),
    ("A5", "MYC", 0.001, -1.5, "myc"),
    ("A6", "GAPDH", 0.04, 0.5, "gapdh"),
]


def write_table(path: Path, rows, header=HEADER) -> Path:
    lines = ["\t".join(header)]
    lines.extend("\t".join(str(value) for value in row) for row in rows)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def scenario_table(tmp_path: Path) -> Path:
    return write_table(tmp_path / "GSE0000.tsv", SCENARIO_ROWS)
