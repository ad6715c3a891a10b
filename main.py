#!/usr/bin/env python3
"""
Differential Expression Gene List Pipeline

This script turns a differential expression results table into lists of
up- and down-regulated gene symbols, e.g. for enrichment analysis in
external tools.

The pipeline consists of:
1. Loading the tab-separated table and selecting the DE columns
2. Removing probes with no gene symbol or an ambiguous (///) symbol
3. Filtering by adjusted p-value and absolute log fold change
4. Writing sorted unique up- and down-regulated gene symbols

Usage:
    python main.py INPUT [--output-dir OUTPUT_DIR] [--dataset NAME] [--p-value P] [--logfc FC]

Arguments:
    INPUT            Tab-separated DE results table (ID, Gene.symbol, adj.P.Val, logFC, Gene.title)
    --output-dir     Directory for output files (default: Results)
    --dataset        Output file prefix (default: input file name without extension)
    --output-up      Explicit path for the up-regulated list
    --output-down    Explicit path for the down-regulated list
    --p-value        Maximum adjusted p-value (default: 0.05)
    --logfc          Minimum absolute log fold change (default: 1.0)
"""

import argparse
import sys
from pathlib import Path

from deg_lists.constants import (
    DEFAULT_FOLD_CHANGE_THRESHOLD,
    DEFAULT_P_VALUE_THRESHOLD,
    DOWN_SUFFIX,
    UP_SUFFIX,
)
from deg_lists.data_processing import check_thresholds, run_data_processing
from deg_lists.exceptions import ParseError, SchemaError


def main(argv=None):
    """Run the differential expression gene list pipeline."""

    parser = argparse.ArgumentParser(
        description="Differential Expression Gene List Pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Write Results/GSE12345_up.txt and Results/GSE12345_down.txt
    python main.py GSE12345.tsv

    # Stricter cutoffs and a custom output prefix
    python main.py GSE12345.tsv --p-value 0.01 --logfc 2 --dataset strict

    # Explicit output paths
    python main.py GSE12345.tsv --output-up up.txt --output-down down.txt
        """
    )

    parser.add_argument(
        "input",
        help="Tab-separated DE results table"
    )

    parser.add_argument(
        "--output-dir",
        default="Results",
        help="Directory for output files (default: Results)"
    )

    parser.add_argument(
        "--dataset",
        default=None,
        help="Prefix of the output files (default: input file name without extension)"
    )

    parser.add_argument(
        "--output-up",
        default=None,
        help="Path for the up-regulated gene list (overrides --output-dir/--dataset)"
    )

    parser.add_argument(
        "--output-down",
        default=None,
        help="Path for the down-regulated gene list (overrides --output-dir/--dataset)"
    )

    parser.add_argument(
        "--p-value",
        type=float,
        default=DEFAULT_P_VALUE_THRESHOLD,
        help=f"Maximum adjusted p-value (default: {DEFAULT_P_VALUE_THRESHOLD})"
    )

    parser.add_argument(
        "--logfc",
        type=float,
        default=DEFAULT_FOLD_CHANGE_THRESHOLD,
        help=f"Minimum absolute log fold change (default: {DEFAULT_FOLD_CHANGE_THRESHOLD})"
    )

    args = parser.parse_args(argv)

    try:
        check_thresholds(args.p_value, args.logfc)
    except ValueError as e:
        parser.error(str(e))

    # Resolve paths
    input_path = Path(args.input).resolve()
    output_dir = Path(args.output_dir).resolve()
    dataset = args.dataset or input_path.stem
    output_up = Path(args.output_up).resolve() if args.output_up else output_dir / f"{dataset}{UP_SUFFIX}"
    output_down = Path(args.output_down).resolve() if args.output_down else output_dir / f"{dataset}{DOWN_SUFFIX}"

    print("=" * 60)
    print("  Differential Expression Gene List Pipeline")
    print("=" * 60)
    print(f"\nInput file: {input_path}")
    print(f"Up-regulated output: {output_up}")
    print(f"Down-regulated output: {output_down}")
    print(f"Cutoffs: adj.P.Val <= {args.p_value}, |logFC| >= {args.logfc}")
    print()

    # Validate input file
    if not input_path.is_file():
        print(f"ERROR: Missing input file: {input_path}")
        return 1

    try:
        results = run_data_processing(
            input_path,
            output_up,
            output_down,
            p_value_threshold=args.p_value,
            fold_change_threshold=args.logfc
        )
    except (ParseError, SchemaError) as e:
        print(f"ERROR in input table: {e}")
        return 1
    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e}")
        return 1
    except OSError as e:
        print(f"ERROR reading input or writing output: {e}")
        return 1

    # Summary
    print("=" * 60)
    print("  Pipeline Complete")
    print("=" * 60)
    print("\nOutput files generated:")

    for path in (output_up, output_down):
        if path.exists():
            size = path.stat().st_size / 1024
            print(f"  ✓ {path.name} ({size:.1f} KB)")
        else:
            print(f"  ✗ {path.name} (not created)")

    print(f"\nUp-regulated: {len(results['up_genes'])} genes")
    print(f"Down-regulated: {len(results['down_genes'])} genes")

    print("\nPipeline execution completed successfully!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
