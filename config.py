#!/usr/bin/env python3
# config.py: named defaults for the quiz, celebration and particle physics

APP_TITLE = "Quiz Burst: random multiple-choice quiz"

SESSION_SIZE = 5
CELEBRATION_THRESHOLD_DEFAULT = 3   # absolute score, not a fraction
FIREWORKS_ON_PERFECT = 3

# remark cut-offs, as fractions of session length (ceil applied)
REMARK_EXCELLENT = 0.8
REMARK_GOOD = 0.6

# confetti
CONFETTI_GRAVITY = 0.06
CONFETTI_PRUNE_MARGIN = 40
CONFETTI_PER_POINT = 20
CONFETTI_BASE = 20

# fireworks
FIREWORK_GRAVITY = 0.2
SPARK_COUNT = 100
SPARK_DAMPING = 0.95
SPARK_LIFESPAN = 255
SPARK_DECAY = 4

FRAME_MS = 40
