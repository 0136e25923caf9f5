# studio/client/exports.py
from __future__ import annotations

import csv
import io
from datetime import date
from typing import Any, Dict, Iterable, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from studio.utils.br import format_date_br

CSV_HEADERS = ["Nome", "Email", "Telefone", "Status", "Plano", "Data Cadastro"]
PDF_HEADERS = ["Nome", "Email", "Telefone", "Status", "Plano"]
PDF_TITLE = "Lista de Alunos - VOLL Pilates"


def export_filename(extension: str, today: Optional[date] = None) -> str:
    d = today or date.today()
    return f"alunos_{d.isoformat()}.{extension}"


def students_to_csv(students: Iterable[Dict[str, Any]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for s in students:
        writer.writerow([
            s.get("name") or "",
            s.get("email") or "",
            s.get("phone") or "",
            s.get("status") or "",
            s.get("plan") or "",
            format_date_br(s.get("created_at")),
        ])
    # sem quebra de linha no fim
    return buf.getvalue().rstrip("\n")


def students_to_pdf(students: Iterable[Dict[str, Any]]) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=14 * mm, rightMargin=14 * mm,
                            topMargin=15 * mm, bottomMargin=15 * mm, title=PDF_TITLE)
    styles = getSampleStyleSheet()

    rows = [PDF_HEADERS]
    for s in students:
        rows.append([s.get("name") or "", s.get("email") or "", s.get("phone") or "",
                     s.get("status") or "", s.get("plan") or ""])

    table = Table(rows, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2980b9")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f5f5f5")]),
    ]))

    doc.build([Paragraph(PDF_TITLE, styles["Heading2"]), Spacer(1, 4 * mm), table])
    return buffer.getvalue()
