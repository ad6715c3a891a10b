"""
Exceptions Module

Errors raised while reading and projecting a DE results table.
Missing input files raise the builtin FileNotFoundError and output
write failures surface as OSError.
"""


class ParseError(ValueError):
    """Malformed header, row, or numeric value in the input table."""

    def __init__(self, message: str, path=None, line=None, column=None):
        self.path = path
        self.line = line
        self.column = column
        parts = []
        if path is not None:
            parts.append(str(path))
        if line is not None:
            parts.append(f"line {line}")
        if column is not None:
            parts.append(f"column '{column}'")
        location = ", ".join(parts)
        super().__init__(f"{location}: {message}" if location else message)


class SchemaError(ValueError):
    """A requested column is absent from the table."""

    def __init__(self, missing, available):
        self.missing = list(missing)
        self.available = list(available)
        super().__init__(
            f"Missing required column(s): {', '.join(self.missing)} "
            f"(available: {', '.join(self.available)})"
        )
