import pandas as pd

import warnings


def _read_table(path: str) -> pd.DataFrame:
    """
    Read a spreadsheet, picking the parser from the file extension.
    """

    ext = path.split(".")[-1].strip().lower()
    try:
        if ext in ["xlsx", "xls"]:
            df = pd.read_excel(path)
        elif ext == "csv":
            df = pd.read_csv(path)
        elif ext == "tsv":
            df = pd.read_csv(path, sep="\t")
        else:
            df = pd.read_csv(path, sep=None, engine="python")
    except FileNotFoundError:
        raise ValueError(f"File not found at path: {path}")
    except Exception as e:
        raise IOError(f"Error reading file {path}: {e}")

    return df


def read_column(source, column: str) -> pd.Series:
    """
    Pull one column out of a spreadsheet so it can be searched.

    Parameters
    ----------
    source : pandas.DataFrame or str
        A pandas DataFrame or the path to a .csv, .tsv, .xlsx or .xls file.
        Other extensions are read with delimiter sniffing.
    column : str
        The column to return. If it is missing but the table has the
        'Unnamed: 0' column pandas writes for a saved index, that column is
        used instead.

    Returns
    -------
    pandas.Series
        The column, with a fresh 0..N-1 index so positions and labels agree.

    Raises
    ------
    TypeError
        If `source` is neither a path nor a DataFrame.
    ValueError
        If the file or the column cannot be found.
    """

    if isinstance(source, str):
        df = _read_table(source)
    elif isinstance(source, pd.DataFrame):
        df = source
    else:
        raise TypeError("`source` must be a file path (str) or pandas DataFrame.")

    unnamed_col = "Unnamed: 0"
    if column not in df.columns:
        if unnamed_col not in df.columns:
            raise ValueError(
                f"Column '{column}' not found. Available columns: {list(df.columns)}"
            )
        warnings.warn(f"Column '{column}' not found; using '{unnamed_col}' instead")
        column = unnamed_col

    return df[column].reset_index(drop=True)
