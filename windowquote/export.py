from __future__ import annotations
import re
from io import BytesIO
from typing import Iterable

import pandas as pd

# PDF (ReportLab)
from reportlab.platypus import SimpleDocTemplate, Paragraph, Table, TableStyle, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from .editor import WindowType
from .pricing import compute_total, format_money, line_total

COLUMNS = ["Window type", "Unit price", "Count", "Line total"]


def quote_frame(items: Iterable[WindowType]) -> pd.DataFrame:
    rows = [{
        "Window type": it.name,
        "Unit price": round(it.price, 2),
        "Count": it.count,
        "Line total": round(line_total(it.price, it.count), 2),
    } for it in items]
    return pd.DataFrame(rows, columns=COLUMNS)


def generate_quote_pdf(items: list, title: str = "") -> bytes:
    """Build a one-page PDF of the line items and the total."""
    buf = BytesIO()
    doc = SimpleDocTemplate(buf)
    styles = getSampleStyleSheet()
    elems = []

    header = "Window Quote"
    if title:
        header += f" | {title}"
    elems.append(Paragraph(header, styles["Title"]))
    elems.append(Spacer(1, 8))

    if not items:
        elems.append(Paragraph("No window types in this quote.", styles["Normal"]))
    else:
        data = [COLUMNS]
        for it in items:
            data.append([it.name, format_money(it.price), str(it.count),
                         format_money(line_total(it.price, it.count))])
        data.append(["Total", "", "", format_money(compute_total(items))])

        t = Table(data, hAlign="LEFT")
        t.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.grey),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
            ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ]))
        elems.append(t)

    doc.build(elems)
    pdf = buf.getvalue()
    buf.close()
    return pdf


def generate_quote_xlsx(items: list, title: str = "") -> bytes:
    buf = BytesIO()
    df = quote_frame(items)
    total = pd.DataFrame([{"Window type": "Total", "Line total": compute_total(items)}], columns=COLUMNS)
    # Excel sheet names: at most 31 chars, none of []:*?/\
    sheet = re.sub(r"[\[\]:*?/\\]", "-", title or "Quote")[:31]
    with pd.ExcelWriter(buf, engine="openpyxl", mode="w") as writer:
        pd.concat([df, total], ignore_index=True).to_excel(writer, sheet_name=sheet, index=False)
    return buf.getvalue()
