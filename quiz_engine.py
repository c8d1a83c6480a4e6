#!/usr/bin/env python3
# quiz_engine.py: question model, sampler, scorer and session state machine

import logging
import math
import random
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from config import (
    CELEBRATION_THRESHOLD_DEFAULT, CONFETTI_BASE, CONFETTI_PER_POINT,
    FIREWORKS_ON_PERFECT, REMARK_EXCELLENT, REMARK_GOOD, SESSION_SIZE,
)

logger = logging.getLogger(__name__)

LETTERS = ("A", "B", "C", "D")
UNANSWERED = -1

QUIZ = "quiz"
RESULT = "result"

_LETTER_RE = re.compile(r"^[A-Da-d]$")
_DIGIT_RE = re.compile(r"^[1-4]$")


def parse_answer(token) -> Optional[int]:
    """Map an answer token (A-D, a-d or 1-4) to a choice index.

    Anything else returns None, meaning no choice can ever be judged correct.
    """
    s = str(token if token is not None else "").strip()
    if _LETTER_RE.match(s):
        return LETTERS.index(s.upper())
    if _DIGIT_RE.match(s):
        return int(s) - 1
    return None


@dataclass(frozen=True)
class Question:
    question: str
    choices: Tuple[str, str, str, str]
    correct_index: Optional[int] = None
    feedback: str = ""

    @staticmethod
    def from_dict(d: Dict) -> "Question":
        return Question(
            question=str(d.get("question") or ""),
            choices=tuple(str(d.get(k) or "") for k in LETTERS),
            correct_index=parse_answer(d.get("answer")),
            feedback=str(d.get("feedback") or ""),
        )

    def copy(self) -> "Question":
        return Question(self.question, tuple(self.choices), self.correct_index, self.feedback)

    def choice_label(self, index: Optional[int]) -> str:
        if index is None or not 0 <= index < len(self.choices):
            return "(unknown)"
        return f"{LETTERS[index]}: {self.choices[index]}"


def sample_questions(bank: List[Question], n: int = SESSION_SIZE,
                     rng: Optional[random.Random] = None) -> List[Question]:
    """Draw min(n, len(bank)) distinct questions in random order.

    Picks a random position from a shrinking pool of indices, so every
    ordering of the drawn subset is equally likely.
    """
    rng = rng or random.Random()
    pool = list(range(len(bank)))
    picked = []
    for _ in range(min(n, len(bank))):
        r = rng.randrange(len(pool))
        picked.append(bank[pool.pop(r)].copy())
    return picked


@dataclass
class Session:
    items: List[Question]
    answers: List[int] = field(default_factory=list)
    index: int = 0

    def __post_init__(self):
        if len(self.answers) != len(self.items):
            self.answers = [UNANSWERED] * len(self.items)

    def current(self) -> Optional[Question]:
        if 0 <= self.index < len(self.items):
            return self.items[self.index]
        return None

    def current_answer(self) -> int:
        if 0 <= self.index < len(self.answers):
            return self.answers[self.index]
        return UNANSWERED

    def is_last(self) -> bool:
        return self.index >= len(self.items) - 1


@dataclass(frozen=True)
class ResultEntry:
    correct: bool
    user_choice: int
    correct_choice: Optional[int]
    feedback: str


@dataclass(frozen=True)
class QuizResult:
    score: int
    total: int
    entries: Tuple[ResultEntry, ...]
    celebrate: bool
    remark: str

    @property
    def percent(self) -> int:
        return int(100 * self.score / max(1, self.total))

    @property
    def perfect(self) -> bool:
        return self.total > 0 and self.score == self.total


def remark_for(score: int, total: int) -> str:
    if score == total:
        return "Excellent! All correct!"
    if score >= math.ceil(total * REMARK_EXCELLENT):
        return "Great performance!"
    if score >= math.ceil(total * REMARK_GOOD):
        return "Not bad, there is room to improve!"
    return "Keep going and review some more!"


def _feedback_for(q: Question, ok: bool) -> str:
    if q.feedback:
        return q.feedback
    if ok:
        return "Correct!"
    return f"Correct answer: {q.choice_label(q.correct_index)}"


def score_session(session: Session, threshold: int = CELEBRATION_THRESHOLD_DEFAULT) -> QuizResult:
    entries = []
    for q, user in zip(session.items, session.answers):
        ok = user != UNANSWERED and q.correct_index is not None and user == q.correct_index
        entries.append(ResultEntry(correct=ok, user_choice=user,
                                   correct_choice=q.correct_index,
                                   feedback=_feedback_for(q, ok)))
    score = sum(1 for e in entries if e.correct)
    total = len(session.items)
    return QuizResult(score=score, total=total, entries=tuple(entries),
                      celebrate=score >= threshold, remark=remark_for(score, total))


def celebration_plan(result: QuizResult,
                     fireworks_on_perfect: int = FIREWORKS_ON_PERFECT) -> Tuple[int, int]:
    """Return (confetti pieces, fireworks) to launch for a result."""
    if not result.celebrate:
        return 0, 0
    confetti = result.score * CONFETTI_PER_POINT + CONFETTI_BASE
    return confetti, (fireworks_on_perfect if result.perfect else 0)


class QuizEngine:
    """Owns one quiz attempt at a time: QUIZ while answering, RESULT after submit.

    Transitions that are not valid in the current state return False and
    leave everything unchanged.
    """

    def __init__(self, questions: List[Question], *, size: int = SESSION_SIZE,
                 threshold: int = CELEBRATION_THRESHOLD_DEFAULT,
                 rng: Optional[random.Random] = None):
        self.all_questions = list(questions)
        self.size = size
        self.threshold = threshold
        self.rng = rng or random.Random()
        self.session = Session(items=[])
        self.result: Optional[QuizResult] = None
        self.state = QUIZ
        self.restart()

    def restart(self) -> None:
        self.session = Session(items=sample_questions(self.all_questions, self.size, self.rng))
        self.result = None
        self.state = QUIZ
        logger.debug("new session with %d of %d questions",
                     len(self.session.items), len(self.all_questions))

    def current(self) -> Optional[Question]:
        if self.state != QUIZ:
            return None
        return self.session.current()

    def select_answer(self, choice: int) -> bool:
        if self.state != QUIZ or self.session.current() is None:
            return False
        if not 0 <= choice < len(LETTERS):
            return False
        self.session.answers[self.session.index] = choice
        return True

    def can_advance(self) -> bool:
        if self.state != QUIZ:
            return False
        if not self.session.items:
            return True
        return self.session.current_answer() != UNANSWERED

    def advance(self) -> bool:
        if not self.can_advance():
            return False
        if self.session.is_last():
            return self.submit()
        self.session.index += 1
        logger.debug("advanced to question %d", self.session.index + 1)
        return True

    def submit(self) -> bool:
        if self.state != QUIZ:
            return False
        self.result = score_session(self.session, self.threshold)
        self.state = RESULT
        logger.info("quiz submitted: %d/%d", self.result.score, self.result.total)
        return True
