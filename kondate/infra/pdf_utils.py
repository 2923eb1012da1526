import io
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from kondate.domain.MenuPlan import MenuPlan
from kondate.domain.ShoppingListItem import ShoppingListItem
from kondate.utilities.dates import format_date

# Built-in Japanese CID font; needs no font file on disk
JP_FONT = "HeiseiKakuGo-W5"


def _register_font():
    if JP_FONT not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(UnicodeCIDFont(JP_FONT))


def _fmt(amount) -> str:
    return f"{amount:g}" if isinstance(amount, float) else str(amount)


def generate_pdf_for_shopping_list(items: List[ShoppingListItem], plan: Optional[MenuPlan] = None) -> bytes:
    """Generate a PDF table: Category / Item / Needed / In stock / To buy."""
    _register_font()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    title_style = styles["Title"].clone("JPTitle", fontName=JP_FONT)
    title = "買い物リスト"
    if plan is not None and plan.start_date:
        title += f" ({format_date(plan.start_date)} - {format_date(plan.end_date)})"
    elements = [Paragraph(title, title_style), Spacer(1, 16)]

    data = [["カテゴリ", "食材", "必要量", "在庫", "購入量"]]
    for it in items:
        data.append([
            it.ingredient.category.value,
            it.name,
            f"{_fmt(it.needed)} {it.unit}",
            f"{_fmt(it.in_stock)} {it.unit}",
            f"{_fmt(it.shortage)} {it.unit}",
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("FONTNAME", (0, 0), (-1, -1), JP_FONT),
        ("FONTSIZE", (0, 0), (-1, 0), 12),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
