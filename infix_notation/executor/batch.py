# infix_notation/executor/batch.py

import numpy as np
import pandas as pd
from typing import Any, Dict, List, Optional

from ..notation.converter import convert
from ..parser.config import ParserConfig
from ..parser.error_handler import ErrorHandler, NotationError
from ..utils.logging_config import get_logger, PerformanceTimer

logger = get_logger(__name__)

OUTPUT_COLUMNS = ['parenthesized', 'postfix', 'prefix', 'error']
ERROR_MODES = ('raise', 'coerce')


def _empty_record(error: Optional[str] = None) -> Dict[str, Any]:
    return {
        'parenthesized': np.nan,
        'postfix': np.nan,
        'prefix': np.nan,
        'error': error,
    }


def convert_frame(
    df: pd.DataFrame,
    column: str = 'expression',
    errors: str = 'raise',
    config: Optional[ParserConfig] = None,
    error_handler: Optional[ErrorHandler] = None
) -> pd.DataFrame:
    """
    Convert every expression in ``df[column]`` to its three notations.

    Args:
        df: Input DataFrame
        column: Name of the column holding infix expressions
        errors: 'raise' re-raises the first conversion failure; 'coerce'
            records the diagnostic in the ``error`` column and leaves the
            notation columns as NaN
        config: Parser configuration shared by every row
        error_handler: Optional collector that receives every failure, with
            the 1-based row number as the line

    Returns:
        A new DataFrame with the same index holding the input column followed
        by object columns ``parenthesized``, ``postfix``, ``prefix`` and
        ``error``. Missing input cells (None, NaN, ``pd.NA``) give NaN
        notations; ``error`` is None for every row that did not fail.
    """
    if errors not in ERROR_MODES:
        raise ValueError(f"errors must be one of {ERROR_MODES}, got {errors!r}")
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found in DataFrame")

    handler = error_handler if error_handler is not None else ErrorHandler()
    records: List[Dict[str, Any]] = []

    with PerformanceTimer(f"convert_frame over {len(df)} rows"):
        for row_number, value in enumerate(df[column].tolist(), 1):
            if pd.api.types.is_scalar(value) and pd.isna(value):
                records.append(_empty_record())
                continue
            try:
                notations = convert(str(value), config)
            except NotationError as e:
                if errors == 'raise':
                    raise
                handler.add_exception(e, line=row_number)
                records.append(_empty_record(handler.get_formatted_errors()[-1]))
                continue
            record = notations.as_dict()
            record['error'] = None
            records.append(record)

    if handler.has_errors():
        logger.info("%d of %d expressions failed to convert", len(handler.get_errors()), len(df))

    # object dtype keeps None in the error column of rows that converted.
    output = pd.DataFrame(records, columns=OUTPUT_COLUMNS, index=df.index, dtype=object)
    output.insert(0, column, df[column].to_numpy())
    return output


def convert_series(series: pd.Series, errors: str = 'raise',
                   config: Optional[ParserConfig] = None) -> pd.DataFrame:
    column = series.name if series.name is not None else 'expression'
    return convert_frame(series.to_frame(name=column), column=column, errors=errors, config=config)
