#!/usr/bin/env python3
# certificate.py: one-page PDF summary of a finished quiz
#
# Required: reportlab

import hashlib
from datetime import datetime
from typing import List

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas

from config import APP_TITLE
from quiz_engine import LETTERS, Question, QuizResult, UNANSWERED


def _short_cert_id(name: str, dt: datetime) -> str:
    b = (name.strip() + "|" + dt.isoformat()).encode("utf-8")
    return dt.strftime("%y%m%d") + "-" + hashlib.sha1(b).hexdigest()[:8].upper()


def _wrap(c: canvas.Canvas, text: str, max_width: float, font_name: str, font_size: float) -> List[str]:
    lines = []
    for raw in text.splitlines() or [""]:
        cur = ""
        for w in raw.split():
            t = (cur + " " + w).strip()
            if c.stringWidth(t, font_name, font_size) <= max_width:
                cur = t
            else:
                if cur: lines.append(cur)
                cur = w
        lines.append(cur)
    return lines


def _answer_text(q: Question, choice: int) -> str:
    if choice == UNANSWERED:
        return "Not answered"
    return f"{LETTERS[choice]}: {q.choices[choice]}"


def generate_certificate(
    name: str,
    items: List[Question],
    result: QuizResult,
    dt: datetime,
    path: str,
    *,
    issuer: str = APP_TITLE,
) -> str:
    """Write the result summary to ``path`` and return the certificate number."""
    c = canvas.Canvas(path, pagesize=A4)
    W, H = A4

    # Borders
    c.setLineWidth(4); c.rect(1*cm, 1*cm, W-2*cm, H-2*cm)
    c.setLineWidth(1); c.rect(1.4*cm, 1.4*cm, W-2.8*cm, H-2.8*cm)

    c.setFont("Helvetica-Bold", 24)
    c.drawCentredString(W/2, H-3.4*cm, "QUIZ RESULT")
    c.setFont("Helvetica", 12)
    c.drawCentredString(W/2, H-4.3*cm, issuer)

    cert_id = _short_cert_id(name, dt)
    c.setFont("Helvetica", 10)
    c.drawCentredString(W/2, H-5.0*cm, f"Certificate No: {cert_id}")

    c.setFont("Helvetica-Bold", 18)
    c.drawCentredString(W/2, H-6.4*cm, name or "Participant")

    c.setFont("Helvetica", 13)
    c.drawCentredString(W/2, H-7.4*cm, f"Score: {result.score}/{result.total} ({result.percent}%)")
    c.setFont("Helvetica-Oblique", 11)
    c.drawCentredString(W/2, H-8.1*cm, result.remark)
    c.drawCentredString(W/2, H-8.7*cm, f"Date: {dt.strftime('%Y-%m-%d %H:%M')}")

    # Per-question review
    x = 2.2*cm
    max_w = W - 4.4*cm
    y = H - 10.2*cm
    for i, (q, entry) in enumerate(zip(items, result.entries), start=1):
        mark = "OK" if entry.correct else "X"
        lines = _wrap(c, f"{i}. [{mark}] {q.question}", max_w, "Helvetica-Bold", 10)
        lines_fn = [("Helvetica-Bold", ln) for ln in lines]
        lines_fn.append(("Helvetica", f"   Your answer: {_answer_text(q, entry.user_choice)}"))
        lines_fn += [("Helvetica", "   " + ln) for ln in _wrap(c, entry.feedback, max_w - 0.6*cm, "Helvetica", 9)]
        for font, ln in lines_fn:
            if y < 3.0*cm:
                c.showPage(); y = H - 2.5*cm
            c.setFont(font, 10 if font.endswith("Bold") else 9)
            c.drawString(x, y, ln)
            y -= 0.5*cm
        y -= 0.3*cm

    c.setFont("Helvetica", 8.5)
    c.drawCentredString(W/2, 2.1*cm, "Practice quiz summary, for self-study only.")

    c.showPage(); c.save()
    return cert_id
