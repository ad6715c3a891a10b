"""
I/O Utilities Module

This module provides the file I/O functions used across the
differential expression gene list pipeline.
"""

import csv
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import pandas as pd

from .constants import INPUT_DELIMITER
from .exceptions import ParseError

PathLike = Union[str, Path]


def load_de_table(file_path: PathLike, delimiter: str = INPUT_DELIMITER) -> pd.DataFrame:
    """
    Load a differential expression results table.

    Every cell is kept as text; numeric columns are converted later
    by data_processing.to_records.

    Args:
        file_path: Path to the tab-separated results file (with header row)
        delimiter: Field delimiter

    Returns:
        DataFrame with the header names as columns, rows in file order

    Raises:
        FileNotFoundError: If file_path does not exist
        ParseError: If the file is not valid UTF-8, the header is missing
            or malformed, or a row has a different number of fields than
            the header
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    # utf-8-sig drops the byte order mark written by spreadsheet exports
    with open(path, newline='', encoding='utf-8-sig') as file:
        reader = csv.reader(file, delimiter=delimiter)
        try:
            header, rows = _read_rows(reader, path)
        except UnicodeDecodeError as e:
            raise ParseError(
                f"invalid UTF-8 ({e.reason})", path=path, line=reader.line_num + 1
            ) from e

    return pd.DataFrame(rows, columns=header, dtype=str)


def _read_rows(reader, path: Path) -> Tuple[List[str], List[List[str]]]:
    """Read and validate the header and data rows of a csv reader."""
    header = next(reader, None)
    if not header:
        raise ParseError("missing header row", path=path, line=1)

    if any(name == "" for name in header):
        raise ParseError("empty column name in header", path=path, line=reader.line_num)
    duplicated = sorted({name for name in header if header.count(name) > 1})
    if duplicated:
        raise ParseError(
            f"duplicated column name(s) in header: {', '.join(duplicated)}",
            path=path, line=reader.line_num
        )

    rows = []
    for row in reader:
        if not row:
            continue  # Skip blank lines
        if len(row) != len(header):
            raise ParseError(
                f"expected {len(header)} fields, found {len(row)}",
                path=path, line=reader.line_num
            )
        rows.append(row)
    return header, rows


def write_gene_symbols(symbols: Iterable[str], output_path: PathLike):
    """
    Write gene symbols to a text file, one per line.

    The file is overwritten. An empty collection produces an empty file.

    Args:
        symbols: Gene symbols in output order
        output_path: Output file path
    """
    with open(output_path, 'w', newline='\n', encoding='utf-8') as file:
        for symbol in symbols:
            file.write(f"{symbol}\n")


def load_gene_symbols(file_path: PathLike) -> List[str]:
    """
    Load a gene list written by write_gene_symbols.

    Args:
        file_path: Path to a one-symbol-per-line text file

    Returns:
        List of symbols in file order (blank lines ignored)
    """
    with open(file_path, encoding='utf-8') as file:
        return [line.rstrip('\r\n') for line in file if line.strip()]
