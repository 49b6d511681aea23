from io import StringIO

import pandas as pd

from ...application.models import TokenizedText
from ...exceptions import DataParseError

BYTE_ORDER_MARK = "\ufeff"


class PandasDelimitedTextTokenizer:
    """Split delimited text into header names and string-valued records.

    Every cell is kept as text (empty cells become ``""``); type decisions are
    left to the caller.
    """

    def __init__(self, *, skip_blank_lines: bool = True) -> None:
        super().__init__()
        self.skip_blank_lines = skip_blank_lines

    def tokenize(self, content: str, delimiter: str) -> TokenizedText:
        text = content.removeprefix(BYTE_ORDER_MARK)
        try:
            # pandas renames repeated headers (A, A.1); keep the raw names
            header_row = pd.read_csv(
                StringIO(text),
                sep=delimiter,
                header=None,
                nrows=1,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
            )
            frame = pd.read_csv(
                StringIO(text),
                sep=delimiter,
                dtype=str,
                index_col=False,
                keep_default_na=False,
                na_filter=False,
                skip_blank_lines=self.skip_blank_lines,
            )
        except pd.errors.EmptyDataError as e:
            raise DataParseError("Delimited text is empty") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse delimited text: {e}") from e
        except Exception as e:
            raise DataParseError(f"Unexpected error tokenizing text: {e}") from e
        header = [str(column) for column in header_row.iloc[0].tolist()]
        frame.columns = header
        frame = frame.fillna("")
        records = [
            dict(zip(header, row, strict=True))
            for row in frame.itertuples(index=False, name=None)
        ]
        return TokenizedText(header=header, records=records)
