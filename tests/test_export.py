from io import BytesIO

import pandas as pd

from windowquote.editor import WindowType
from windowquote.export import generate_quote_pdf, generate_quote_xlsx, quote_frame

ITEMS = [WindowType("a", "Sash", 100.0, 2), WindowType("b", "Screen", 20.0, 3)]


def test_quote_frame_has_line_totals():
    df = quote_frame(ITEMS)
    assert list(df.columns) == ["Window type", "Unit price", "Count", "Line total"]
    assert df["Line total"].tolist() == [200.0, 60.0]


def test_pdf_is_a_pdf():
    assert generate_quote_pdf(ITEMS, title="Job 12").startswith(b"%PDF")
    assert generate_quote_pdf([], title="").startswith(b"%PDF")


def test_xlsx_carries_total_row():
    data = generate_quote_xlsx(ITEMS, title="Job 12: front/back")
    df = pd.read_excel(BytesIO(data), sheet_name=0)
    assert df["Window type"].tolist() == ["Sash", "Screen", "Total"]
    assert df["Line total"].iloc[-1] == 260.0
