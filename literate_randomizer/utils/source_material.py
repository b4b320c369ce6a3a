"""
Source material loading.

A corpus is taken, in order of preference, from:
    1. an explicit string
    2. a file (plain text, or CSV whose first column holds the text)
    3. the default corpus bundled with the package
"""

import logging
import os

import pandas as pd

from literate_randomizer.errors import SourceMaterialError

DEFAULT_SOURCE_MATERIAL_FILE = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "data", "default_corpus.txt")
)


def read_csv_text(csv_file_path, header=None):
    """
    Reads a CSV file and joins the rows of its first column with newlines.

    Args:
        csv_file_path (str): The path to the CSV file.
        header (int or None): Row number to use as the column names, or None
                              if the file has no header row.

    Returns:
        str: The first column as a single string; "" for an empty file.
    """
    try:
        df = pd.read_csv(csv_file_path, encoding="UTF-8", header=header)
    except pd.errors.EmptyDataError:
        return ""

    if df.empty:
        return ""
    return "\n".join(df.iloc[:, 0].dropna().astype(str))


def read_source_file(path, logger=None):
    """
    Reads a corpus file.

    Args:
        path (str): Path to a .txt (or any text) or .csv file.
        logger (logging.Logger, optional): Logger for read events.

    Returns:
        str: The corpus text.

    Raises:
        SourceMaterialError: If the file is missing or cannot be read.
    """
    logger = logger or logging.getLogger(__name__)

    if not os.path.isfile(path):
        raise SourceMaterialError(f"Source material file not found: {path}")

    try:
        if path.lower().endswith(".csv"):
            text = read_csv_text(path)
        else:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        logger.error(f"Error reading source material from {path}: {e}")
        raise SourceMaterialError(f"Could not read source material from {path}: {e}") from e

    logger.info("Source material loaded", extra={
        "metrics": {"path": path, "characters": len(text)}
    })
    return text


def load_source_material(source_material=None, source_material_file=None, logger=None):
    """
    Returns the corpus text to build a chain from.

    Args:
        source_material (str, optional): Corpus text; wins when given.
        source_material_file (str, optional): Path to read when no text is given.
        logger (logging.Logger, optional): Logger for read events.

    Returns:
        str: The corpus text.
    """
    if source_material is not None:
        return source_material
    return read_source_file(source_material_file or DEFAULT_SOURCE_MATERIAL_FILE, logger=logger)
