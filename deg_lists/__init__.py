"""
Differential Expression Gene List Pipeline

This package turns a differential expression results table (GEO2R /
limma topTable format) into sorted lists of up- and down-regulated
gene symbols.

Modules:
--------
constants
    Column names, Record field mapping, default thresholds, output naming

exceptions
    ParseError and SchemaError raised while reading the input table

io_utils
    Loading the tab-separated results table and writing gene lists

data_processing
    Column selection, gene symbol cleaning, significance and fold change
    filters, direction split and symbol extraction

Usage:
------
Run the complete pipeline:
    $ python main.py GSE12345.top.table.tsv --output-dir Results

Or run the processing module directly:
    $ python -m deg_lists.data_processing table.tsv --output-up up.txt --output-down down.txt
"""

__version__ = "1.0.0"

# Expose main functions for programmatic use
from .data_processing import run_data_processing
from .exceptions import ParseError, SchemaError
