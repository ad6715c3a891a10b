"""
Constants Module

This module contains all configuration constants used across the
differential expression gene list pipeline.
"""

# Header names of the columns read from the DE results table (GEO2R / limma topTable)
ID_COLUMN = "ID"
SYMBOL_COLUMN = "Gene.symbol"
ADJ_P_VALUE_COLUMN = "adj.P.Val"
LOGFC_COLUMN = "logFC"
TITLE_COLUMN = "Gene.title"

# Columns kept by the pipeline, in output order
SOURCE_COLUMNS = [
    ID_COLUMN,
    SYMBOL_COLUMN,
    ADJ_P_VALUE_COLUMN,
    LOGFC_COLUMN,
    TITLE_COLUMN,
]

# Source header -> Record field name
COLUMN_TO_FIELD = {
    ID_COLUMN: "id",
    SYMBOL_COLUMN: "gene_symbol",
    ADJ_P_VALUE_COLUMN: "adjusted_p_value",
    LOGFC_COLUMN: "log_fold_change",
    TITLE_COLUMN: "gene_title",
}

# Record fields parsed as floats; all other fields stay as text
NUMERIC_FIELDS = ["adjusted_p_value", "log_fold_change"]

# Tokens treated as a missing numeric value
MISSING_VALUE_TOKENS = {"", "NA", "NaN", "nan"}

# Probes annotated to several genes join the symbols with this separator
AMBIGUOUS_SEPARATOR = "///"

# Default significance and effect-size cutoffs
DEFAULT_P_VALUE_THRESHOLD = 0.05
DEFAULT_FOLD_CHANGE_THRESHOLD = 1.0

# Input table delimiter and output naming: <dataset>_up.txt / <dataset>_down.txt
INPUT_DELIMITER = "\t"
UP_SUFFIX = "_up.txt"
DOWN_SUFFIX = "_down.txt"
