"""
Command line search of a text file or of one spreadsheet column.
"""
from seqmatch.adapters import (
    from_text,
    from_series
)
from seqmatch.util.io import (
    read_search_config,
    read_column
)
from seqmatch.util.io.read_yaml import SEARCH_DEFAULTS
from seqmatch.util.cli.generalized_main import generalized_main

from typing import Optional


def _column_equals(ignore_case):
    """
    Spreadsheet cells are compared to pattern items as strings.
    """

    if ignore_case:
        return lambda cell, item: str(cell).casefold() == str(item).casefold()
    return lambda cell, item: str(cell) == str(item)


def _build_matcher(subject_file, config):

    pattern = config["pattern"]

    if config["column"] is not None:
        series = read_column(subject_file, config["column"])
        if isinstance(pattern, str):
            pattern = [p.strip() for p in pattern.split(",")]
        return from_series(series, pattern,
                           equals=_column_equals(config["ignore_case"]))

    if not isinstance(pattern, str):
        raise ValueError(
            "a list pattern can only be used together with 'column'"
        )

    try:
        with open(subject_file, "r", encoding=config["encoding"]) as f:
            text = f.read()
    except FileNotFoundError:
        raise ValueError(f"File not found at path: {subject_file}")

    return from_text(text, pattern, ignore_case=config["ignore_case"])


def search_file(subject_file: str,
                pattern: str = "",
                start: int = 0,
                end: Optional[int] = None,
                ignore_case: bool = False,
                reverse: bool = False,
                column: str = "",
                encoding: str = "utf-8",
                config_file: str = "") -> Optional[int]:
    """
    Search a file for a pattern with the Knuth-Morris-Pratt algorithm.

    Prints the index of the match (character offset for text files, row
    position for spreadsheet columns) or 'not found'.

    Parameters
    ----------
    subject_file : str
        Text file to search. When `column` is set, a .csv/.tsv/.xlsx file.
    pattern : str
        Text to look for. For column searches, a comma separated list of
        cell values that must appear in consecutive rows.
    start : int
        First position at which a match may start.
    end : int
        Matches must end before this position. Defaults to the end of the
        file.
    ignore_case : bool
        Compare case-insensitively.
    reverse : bool
        Report the last match rather than the first.
    column : str
        Search this spreadsheet column instead of raw text.
    encoding : str
        Text encoding of `subject_file`.
    config_file : str
        YAML file holding any of the options above. Values given on the
        command line take precedence.
    """

    given = {"pattern": pattern or None,
             "start": start,
             "end": end,
             "ignore_case": ignore_case,
             "reverse": reverse,
             "column": column or None,
             "encoding": encoding}
    overrides = {k: v for k, v in given.items() if v != SEARCH_DEFAULTS[k]}

    config = read_search_config(config_file or None, override_keys=overrides)

    matcher = _build_matcher(subject_file, config)

    search_end = config["end"]
    if search_end is None:
        search_end = matcher.subject_length()

    if config["reverse"]:
        result = matcher.last_index_of(config["start"], search_end)
    else:
        result = matcher.index_of(config["start"], search_end)

    print("not found" if result is None else result)

    return result


def main():
    """
    Console entry point (``seqmatch-search``).
    """
    generalized_main(search_file,
                     manual_arg_types={"end": int},
                     prog="seqmatch-search")


if __name__ == "__main__":
    main()
