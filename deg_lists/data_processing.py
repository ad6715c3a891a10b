"""
Data Processing Module

This module filters a differential expression results table down to
up- and down-regulated gene lists. It includes functions for:
- Selecting the DE columns and converting them to typed Record fields
- Removing probes with no gene symbol or with ambiguous assignments
- Filtering by adjusted p-value and absolute log fold change
- Splitting by direction and extracting sorted unique gene symbols

Every step returns a new DataFrame; inputs are never modified.
"""

import math
from pathlib import Path
from typing import Callable, Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .constants import (
    AMBIGUOUS_SEPARATOR,
    COLUMN_TO_FIELD,
    DEFAULT_FOLD_CHANGE_THRESHOLD,
    DEFAULT_P_VALUE_THRESHOLD,
    MISSING_VALUE_TOKENS,
    NUMERIC_FIELDS,
    SOURCE_COLUMNS,
)
from .exceptions import ParseError, SchemaError
from .io_utils import PathLike, load_de_table, write_gene_symbols

Predicate = Callable[[pd.DataFrame], pd.Series]


class Record(NamedTuple):
    """One probe row of a DE results table."""
    id: str
    gene_symbol: str
    adjusted_p_value: float
    log_fold_change: float
    gene_title: str


def select_columns(table: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """
    Keep only the requested columns, in the requested order.

    Args:
        table: Input table
        columns: Column names to retain

    Returns:
        New DataFrame with the same rows and only the requested columns

    Raises:
        SchemaError: If any requested column is absent
    """
    missing = [col for col in columns if col not in table.columns]
    if missing:
        raise SchemaError(missing, table.columns)
    return table.loc[:, list(columns)].copy()


def to_records(table: pd.DataFrame, source: Optional[PathLike] = None) -> pd.DataFrame:
    """
    Rename the DE columns to Record fields and parse numeric fields.

    Empty cells and NA tokens in numeric fields become NaN, which never
    pass a threshold filter.

    Args:
        table: Table holding the SOURCE_COLUMNS as text
        source: Input path, reported in parse errors

    Returns:
        New DataFrame with Record field columns

    Raises:
        ParseError: If a numeric field holds non-numeric text, or an
            adjusted p-value lies outside [0, 1]
    """
    records = select_columns(table, SOURCE_COLUMNS).rename(columns=COLUMN_TO_FIELD)

    for field in NUMERIC_FIELDS:
        values = records[field].astype(str).str.strip()
        missing = values.isin(MISSING_VALUE_TOKENS)
        parsed = pd.to_numeric(values.where(~missing, np.nan), errors="coerce")
        invalid = parsed.isna() & ~missing
        if invalid.any():
            position = int(np.flatnonzero(invalid.to_numpy())[0])
            raise ParseError(
                f"non-numeric value {values.iloc[position]!r} in data row {position + 1}",
                path=source, column=field
            )
        records[field] = parsed.astype(float)

    p_values = records["adjusted_p_value"]
    out_of_range = p_values.notna() & ((p_values < 0) | (p_values > 1))
    if out_of_range.any():
        position = int(np.flatnonzero(out_of_range.to_numpy())[0])
        raise ParseError(
            f"adjusted p-value {p_values.iloc[position]} outside [0, 1] in data row {position + 1}",
            path=source, column="adjusted_p_value"
        )

    return records


def iter_records(table: pd.DataFrame) -> Iterator[Record]:
    """Yield each row of a Record-field table as a Record."""
    for values in table.loc[:, list(Record._fields)].itertuples(index=False, name=None):
        yield Record(*values)


def filter_rows(table: pd.DataFrame, predicate: Predicate) -> pd.DataFrame:
    """
    Keep the rows for which predicate holds.

    Args:
        table: Input table
        predicate: Function mapping a table to a boolean mask over its rows

    Returns:
        New DataFrame with matching rows in their original relative
        order, re-indexed from 0 (empty if no row matches)
    """
    mask = predicate(table).fillna(False).astype(bool)
    return table.loc[mask.to_numpy()].reset_index(drop=True)


def has_gene_symbol(table: pd.DataFrame) -> pd.Series:
    """Predicate: gene symbol is not empty."""
    return table["gene_symbol"] != ""


def is_unambiguous(table: pd.DataFrame) -> pd.Series:
    """Predicate: probe maps to a single gene (no '///' separator)."""
    return ~table["gene_symbol"].str.contains(AMBIGUOUS_SEPARATOR, regex=False)


def is_significant(threshold: float = DEFAULT_P_VALUE_THRESHOLD) -> Predicate:
    """Predicate: adjusted p-value at or below threshold."""
    def predicate(table: pd.DataFrame) -> pd.Series:
        return table["adjusted_p_value"] <= threshold
    return predicate


def has_min_fold_change(threshold: float = DEFAULT_FOLD_CHANGE_THRESHOLD) -> Predicate:
    """Predicate: absolute log fold change at or above threshold."""
    def predicate(table: pd.DataFrame) -> pd.Series:
        return np.abs(table["log_fold_change"]) >= threshold
    return predicate


def split_by_direction(table: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Split a filtered table into up- and down-regulated groups.

    Up (logFC > 0) is sorted by descending fold change, down (logFC < 0)
    by ascending fold change, so the strongest effect comes first in
    both. Rows with logFC == 0 are in neither group. Ties keep their
    filtered-table order.

    Returns:
        Tuple of (up DataFrame, down DataFrame)
    """
    up = (
        filter_rows(table, lambda t: t["log_fold_change"] > 0)
        .sort_values("log_fold_change", ascending=False, kind="mergesort")
        .reset_index(drop=True)
    )
    down = (
        filter_rows(table, lambda t: t["log_fold_change"] < 0)
        .sort_values("log_fold_change", ascending=True, kind="mergesort")
        .reset_index(drop=True)
    )
    return up, down


def extract_gene_symbols(group: pd.DataFrame) -> List[str]:
    """Unique gene symbols of a group, in ascending string order."""
    return sorted(set(group["gene_symbol"]))


def check_thresholds(p_value_threshold: float, fold_change_threshold: float):
    """Reject cutoffs outside their valid ranges."""
    if math.isnan(p_value_threshold) or not 0 <= p_value_threshold <= 1:
        raise ValueError(f"p-value threshold must be in [0, 1], got {p_value_threshold}")
    if math.isnan(fold_change_threshold) or fold_change_threshold < 0:
        raise ValueError(f"fold change threshold must be >= 0, got {fold_change_threshold}")


def run_data_processing(
    input_path: PathLike,
    output_path_up: PathLike,
    output_path_down: PathLike,
    p_value_threshold: float = DEFAULT_P_VALUE_THRESHOLD,
    fold_change_threshold: float = DEFAULT_FOLD_CHANGE_THRESHOLD
) -> Dict:
    """
    Run the complete gene list pipeline.

    Args:
        input_path: Tab-separated DE results table
        output_path_up: Output file for up-regulated gene symbols
        output_path_down: Output file for down-regulated gene symbols
        p_value_threshold: Maximum adjusted p-value
        fold_change_threshold: Minimum absolute log fold change

    Returns:
        Dictionary with per-step row counts and the written gene lists
    """
    check_thresholds(p_value_threshold, fold_change_threshold)
    output_path_up = Path(output_path_up)
    output_path_down = Path(output_path_down)

    print("=== Data Processing Pipeline ===\n")

    # Load and select the DE columns
    print(f"Loading {input_path}...")
    df = load_de_table(input_path)
    print(f"  Loaded table: {df.shape[0]} rows x {df.shape[1]} columns")

    records = to_records(df, source=input_path)
    print(f"  Selected columns: {', '.join(SOURCE_COLUMNS)}")

    # Remove probes without a single gene assignment
    print("\nCleaning gene symbols...")
    with_symbol = filter_rows(records, has_gene_symbol)
    print(f"  With gene symbol: {len(with_symbol)} rows")
    unambiguous = filter_rows(with_symbol, is_unambiguous)
    print(f"  Unambiguous symbol: {len(unambiguous)} rows")

    # Significance and effect size
    print(f"\nFiltering adj.P.Val <= {p_value_threshold} and |logFC| >= {fold_change_threshold}...")
    significant = filter_rows(unambiguous, is_significant(p_value_threshold))
    print(f"  Significant: {len(significant)} rows")
    filtered = filter_rows(significant, has_min_fold_change(fold_change_threshold))
    print(f"  Passing fold change: {len(filtered)} rows")

    # Split and extract symbols
    up, down = split_by_direction(filtered)
    up_genes = extract_gene_symbols(up)
    down_genes = extract_gene_symbols(down)
    print(f"\n  Up-regulated: {len(up)} probes, {len(up_genes)} genes")
    print(f"  Down-regulated: {len(down)} probes, {len(down_genes)} genes")

    # Save gene lists
    for path in (output_path_up, output_path_down):
        path.parent.mkdir(parents=True, exist_ok=True)
    write_gene_symbols(up_genes, output_path_up)
    write_gene_symbols(down_genes, output_path_down)
    print(f"\n  Saved {output_path_up}")
    print(f"  Saved {output_path_down}")

    print("\n=== Data Processing Complete ===\n")

    return {
        'loaded_rows': len(df),
        'shape': df.shape,
        'with_symbol': len(with_symbol),
        'unambiguous': len(unambiguous),
        'significant': len(significant),
        'filtered': len(filtered),
        'up_genes': up_genes,
        'down_genes': down_genes,
        'output_path_up': output_path_up,
        'output_path_down': output_path_down
    }


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Write up/down gene lists from a DE results table")
    parser.add_argument("input", help="Tab-separated DE results table")
    parser.add_argument("--output-up", default="up.txt", help="Output file for up-regulated genes")
    parser.add_argument("--output-down", default="down.txt", help="Output file for down-regulated genes")
    parser.add_argument("--p-value", type=float, default=DEFAULT_P_VALUE_THRESHOLD,
                        help="Maximum adjusted p-value")
    parser.add_argument("--logfc", type=float, default=DEFAULT_FOLD_CHANGE_THRESHOLD,
                        help="Minimum absolute log fold change")

    args = parser.parse_args()
    run_data_processing(args.input, args.output_up, args.output_down, args.p_value, args.logfc)
