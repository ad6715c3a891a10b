from pathlib import Path

import pytest

from deg_lists.exceptions import ParseError
from deg_lists.io_utils import load_de_table, load_gene_symbols, write_gene_symbols

from conftest import HEADER, SCENARIO_ROWS, write_table


def test_load_de_table_keeps_file_order_and_text(scenario_table: Path):
    df = load_de_table(scenario_table)
    assert list(df.columns) == HEADER
    assert df["ID"].tolist() == ["A1", "A2", "A3", "A4", "A5", "A6"]
    assert df.loc[1, "Gene.symbol"] == ""
    assert df.loc[0, "adj.P.Val"] == "0.01"


def test_load_de_table_keeps_extra_columns_and_duplicates(tmp_path: Path):
    header = HEADER + ["P.Value"]
    rows = [
        ("A1", "TP53", 0.01, 2.0, "tumor protein", 0.001),
        ("A1", "TP53", 0.01, 2.0, "tumor protein", 0.001),
    ]
    df = load_de_table(write_table(tmp_path / "t.tsv", rows, header=header))
    assert list(df.columns) == header
    assert len(df) == 2


def test_load_de_table_handles_quoted_fields(tmp_path: Path):
    path = tmp_path / "quoted.tsv"
    path.write_text(
        '"ID"\t"Gene.symbol"\t"adj.P.Val"\t"logFC"\t"Gene.title"\n'
        '"1007_s_at"\t"DDR1"\t"0.01"\t"1.5"\t"discoidin domain receptor"\n',
        encoding="utf-8",
    )
    df = load_de_table(path)
    assert list(df.columns) == HEADER
    assert df.loc[0, "ID"] == "1007_s_at"


def test_load_de_table_skips_blank_lines(tmp_path: Path):
    path = write_table(tmp_path / "t.tsv", SCENARIO_ROWS[:2])
    path.write_text(path.read_text(encoding="utf-8") + "\n\n", encoding="utf-8")
    assert len(load_de_table(path)) == 2


def test_load_de_table_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_de_table(tmp_path / "missing.tsv")


def test_load_de_table_empty_file_has_no_header(tmp_path: Path):
    path = tmp_path / "empty.tsv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ParseError, match="missing header"):
        load_de_table(path)


def test_load_de_table_rejects_duplicated_header(tmp_path: Path):
    path = write_table(tmp_path / "dup.tsv", [("A1", "TP53")], header=["ID", "ID"])
    with pytest.raises(ParseError, match="duplicated"):
        load_de_table(path)


def test_load_de_table_rejects_field_count_mismatch(tmp_path: Path):
    path = tmp_path / "bad.tsv"
    path.write_text(
        "\t".join(HEADER) + "\n"
        "A1\tTP53\t0.01\t2.0\ttumor protein\n"
        "A2\tMYC\t0.01\n",
        encoding="utf-8",
    )
    with pytest.raises(ParseError) as excinfo:
        load_de_table(path)
    assert excinfo.value.line == 3
    assert "bad.tsv" in str(excinfo.value)


def test_write_gene_symbols_one_per_line(tmp_path: Path):
    out = tmp_path / "up.txt"
    write_gene_symbols(["ACTB", "TP53"], out)
    assert out.read_bytes() == b"ACTB\nTP53\n"


def test_write_gene_symbols_empty_is_zero_bytes(tmp_path: Path):
    out = tmp_path / "down.txt"
    write_gene_symbols([], out)
    assert out.exists()
    assert out.stat().st_size == 0


def test_write_gene_symbols_overwrites(tmp_path: Path):
    out = tmp_path / "up.txt"
    out.write_text("OLD\nLIST\nHERE\n", encoding="utf-8")
    write_gene_symbols(["MYC"], out)
    assert out.read_text(encoding="utf-8") == "MYC\n"


def test_write_gene_symbols_missing_directory_raises(tmp_path: Path):
    with pytest.raises(OSError):
        write_gene_symbols(["MYC"], tmp_path / "no_such_dir" / "up.txt")


def test_load_gene_symbols_ignores_blank_lines(tmp_path: Path):
    path = tmp_path / "list.txt"
    path.write_text("ACTB\n\nTP53\n", encoding="utf-8")
    assert load_gene_symbols(path) == ["ACTB", "TP53"]


def test_load_de_table_invalid_utf8(tmp_path: Path):
    path = tmp_path / "latin1.tsv"
    path.write_bytes(
        ("\t".join(HEADER) + "\n").encode("utf-8")
        + b"A1\tTP\xff53\t0.01\t2.0\ttumor protein\n"
    )
    with pytest.raises(ParseError, match="invalid UTF-8") as excinfo:
        load_de_table(path)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_load_de_table_strips_byte_order_mark(tmp_path: Path):
    path = write_table(tmp_path / "excel.tsv", SCENARIO_ROWS[:1])
    path.write_bytes(b"\xef\xbb\xbf" + path.read_bytes())
    df = load_de_table(path)
    assert list(df.columns) == HEADER
    assert df.loc[0, "ID"] == "A1"
