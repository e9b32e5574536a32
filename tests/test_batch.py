import numpy as np
import pandas as pd
import pytest

from infix_notation.executor.batch import OUTPUT_COLUMNS, convert_frame, convert_series
from infix_notation.parser.error_handler import ErrorHandler, LexError, ParseError


def test_convert_frame_coerce(expression_data):
    handler = ErrorHandler()
    result = convert_frame(expression_data, errors='coerce', error_handler=handler)

    assert list(result.columns) == ['expression'] + OUTPUT_COLUMNS
    assert result.index.equals(expression_data.index)
    assert result.loc[0, 'parenthesized'] == '(a+b)+c'
    assert result.loc[1, 'postfix'] == 'a b c ^ ^'
    assert result.loc[3, 'prefix'] == '* + a b c'
    assert result.loc[0, 'error'] is None

    assert pd.isna(result.loc[2, 'postfix'])
    assert 'Error at line 3, column 3' in result.loc[2, 'error']
    assert pd.isna(result.loc[4, 'prefix'])
    assert "Unrecognized character '#'" in result.loc[4, 'error']

    assert [line for _, line, _ in handler.get_errors()] == [3, 5]


def test_convert_frame_raise(expression_data):
    with pytest.raises(ParseError):
        convert_frame(expression_data)


def test_convert_frame_raises_first_failure():
    df = pd.DataFrame({'expression': ['a', 'a$b', 'a+']})
    with pytest.raises(LexError):
        convert_frame(df, errors='raise')


def test_missing_values_are_skipped():
    df = pd.DataFrame({'expression': ['a-b', None, np.nan]})
    result = convert_frame(df)
    assert result.loc[0, 'postfix'] == 'a b -'
    assert result['postfix'].isna().tolist() == [False, True, True]
    assert result['error'].isna().all()


def test_custom_column_and_index():
    df = pd.DataFrame({'formula': ['x*y', 'x^2']}, index=['first', 'second'])
    result = convert_frame(df, column='formula')
    assert list(result.index) == ['first', 'second']
    assert result.loc['second', 'parenthesized'] == 'x^2'
    assert 'formula' in result.columns


def test_original_frame_is_untouched(expression_data):
    before = expression_data.copy()
    convert_frame(expression_data, errors='coerce')
    pd.testing.assert_frame_equal(expression_data, before)


def test_unknown_column():
    with pytest.raises(KeyError):
        convert_frame(pd.DataFrame({'a': ['x']}))


def test_unknown_error_mode(expression_data):
    with pytest.raises(ValueError):
        convert_frame(expression_data, errors='ignore')


def test_convert_series():
    series = pd.Series(['a+b', 'a/b/c'], name='expr')
    result = convert_series(series)
    assert list(result.columns) == ['expr'] + OUTPUT_COLUMNS
    assert result['prefix'].tolist() == ['+ a b', '/ / a b c']


def test_convert_unnamed_series():
    result = convert_series(pd.Series(['a']))
    assert 'expression' in result.columns


def test_nullable_string_missing_cells():
    df = pd.DataFrame({'expression': pd.array(['a+b', None], dtype='string')})
    handler = ErrorHandler()
    result = convert_frame(df, errors='coerce', error_handler=handler)
    assert result.loc[0, 'postfix'] == 'a b +'
    assert pd.isna(result.loc[1, 'postfix'])
    assert pd.isna(result.loc[1, 'error'])
    assert not handler.has_errors()


def test_error_column_keeps_none_for_converted_rows():
    df = pd.DataFrame({'expression': ['a*b', 'a*']})
    result = convert_frame(df, errors='coerce')
    assert result['error'].dtype == object
    assert result['error'].tolist()[0] is None
    assert result['error'].tolist()[1].startswith('Error at line 2, column 3')
