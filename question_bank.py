#!/usr/bin/env python3
# question_bank.py: load questions.csv / questions.json into Question records
#
# CSV header: question,A,B,C,D,answer[,feedback]
# Cells missing from a header are looked up by position instead.

import csv
import json
import logging
import os
from typing import Dict, Iterable, List, Optional

from quiz_engine import Question
from resources import FALLBACK_ROWS

logger = logging.getLogger(__name__)

COLUMNS = ("question", "A", "B", "C", "D", "answer", "feedback")


def _row_from_cells(header: List[str], cells: List[str]) -> Dict[str, str]:
    named = {h.strip(): v for h, v in zip(header, cells)}
    row = {}
    for pos, key in enumerate(COLUMNS):
        val = named.get(key)
        if not val and key != "feedback" and pos < len(cells):
            val = cells[pos]
        row[key] = val or ""
    return row


def load_rows_from_csv(path: str) -> List[Dict[str, str]]:
    with open(path, "r", newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            return []
        return [_row_from_cells(header, cells) for cells in reader if any(c.strip() for c in cells)]


def load_rows_from_json(path: str) -> List[Dict]:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError("question bank JSON must be a list of objects")
    return [r for r in raw if isinstance(r, dict)]


def build_bank(rows: Iterable[Dict]) -> List[Question]:
    bank = []
    for i, row in enumerate(rows, start=1):
        q = Question.from_dict(row)
        if not q.question.strip():
            logger.warning("row %d: empty question text, skipped", i)
            continue
        if q.correct_index is None:
            logger.warning("row %d: unusable answer token %r, question can never be scored correct",
                           i, row.get("answer"))
        bank.append(q)
    return bank


def fallback_bank() -> List[Question]:
    return build_bank(FALLBACK_ROWS)


def load_bank(path: Optional[str] = None) -> List[Question]:
    """Load a question bank, falling back to the built-in one on any problem."""
    if not path:
        return fallback_bank()
    ext = os.path.splitext(path)[1].lower()
    try:
        if ext == ".csv":
            rows = load_rows_from_csv(path)
        elif ext == ".json":
            rows = load_rows_from_json(path)
        else:
            logger.warning("unsupported question bank format %r, using built-in questions", ext)
            return fallback_bank()
    except (OSError, UnicodeDecodeError, csv.Error, ValueError) as e:
        logger.warning("could not load %s (%s), using built-in questions", path, e)
        return fallback_bank()

    bank = build_bank(rows)
    if not bank:
        logger.warning("%s has no usable questions, using built-in questions", path)
        return fallback_bank()
    logger.info("loaded %d questions from %s", len(bank), os.path.basename(path))
    return bank
