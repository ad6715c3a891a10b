#!/usr/bin/env python3
"""
Compare Results Script

Compares the up/down gene lists between two result directories to identify
differences. Useful for verifying reproducibility of the pipeline.

Usage:
    python compare_results.py <dir1> <dir2>
    python compare_results.py Results Check_data  # Default paths

Example:
    python compare_results.py Results_Orig Results_New --verbose
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List

from deg_lists.constants import DOWN_SUFFIX, UP_SUFFIX
from deg_lists.io_utils import load_gene_symbols


def find_gene_lists(directory: str) -> Dict[str, Path]:
    """Map file name to path for every gene list in the directory tree."""
    dir_path = Path(directory)
    found = {}
    for suffix in (UP_SUFFIX, DOWN_SUFFIX):
        for path in sorted(dir_path.rglob(f"*{suffix}")):
            found.setdefault(path.name, path)
    return found


def compare_gene_lists(file1: str, file2: str) -> Dict:
    """Compare two gene list files."""
    genes1 = load_gene_symbols(file1)
    genes2 = load_gene_symbols(file2)
    set1 = set(genes1)
    set2 = set(genes2)

    return {
        'count1': len(genes1),
        'count2': len(genes2),
        'identical': genes1 == genes2,
        'same_set': set1 == set2,
        'only_in_1': sorted(set1 - set2),
        'only_in_2': sorted(set2 - set1)
    }


def compare_directories(dir1: str, dir2: str) -> Dict[str, List]:
    """
    Compare all gene lists found in two result directories.

    Returns:
        Summary dict with 'identical', 'different' and 'missing' file names
        and per-file comparison 'details'
    """
    lists1 = find_gene_lists(dir1)
    lists2 = find_gene_lists(dir2)

    summary = {'identical': [], 'different': [], 'missing': [], 'details': []}

    for name in sorted(set(lists1) | set(lists2)):
        if name not in lists1:
            summary['missing'].append(f"{name} (dir1)")
            continue
        if name not in lists2:
            summary['missing'].append(f"{name} (dir2)")
            continue

        result = compare_gene_lists(lists1[name], lists2[name])
        result['name'] = name
        summary['details'].append(result)
        if result['identical']:
            summary['identical'].append(name)
        else:
            summary['different'].append(name)

    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare result directories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('dir1', nargs='?', default='Results',
                        help='First directory to compare (default: Results)')
    parser.add_argument('dir2', nargs='?', default='Check_data',
                        help='Second directory to compare (default: Check_data)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show detailed differences')

    args = parser.parse_args(argv)

    print("=" * 70)
    print(f"COMPARING: {args.dir1} vs {args.dir2}")
    print("=" * 70)

    summary = compare_directories(args.dir1, args.dir2)

    for result in summary['details']:
        print(f"\n{'-' * 50}")
        print(f"{result['name']}")
        print(f"{'-' * 50}")
        print(f"  Genes: {result['count1']} vs {result['count2']}")
        print(f"  Identical: {result['identical']}")
        if not result['identical']:
            print(f"  Same genes (any order): {result['same_set']}")
            print(f"  Only in dir1: {len(result['only_in_1'])}")
            print(f"  Only in dir2: {len(result['only_in_2'])}")
            if args.verbose:
                print(f"  Sample only in dir1: {result['only_in_1'][:5]}")
                print(f"  Sample only in dir2: {result['only_in_2'][:5]}")

    # Print summary
    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(f"\n✓ Identical ({len(summary['identical'])}):")
    for f in summary['identical']:
        print(f"    {f}")

    print(f"\n✗ Different ({len(summary['different'])}):")
    for f in summary['different']:
        print(f"    {f}")

    if summary['missing']:
        print(f"\n? Missing ({len(summary['missing'])}):")
        for f in summary['missing']:
            print(f"    {f}")

    print()
    return 0 if not summary['different'] and not summary['missing'] else 1


if __name__ == "__main__":
    sys.exit(main())
