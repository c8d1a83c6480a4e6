#!/usr/bin/env python3
# particles.py: confetti shower and fireworks, stepped once per frame
#
# Positions are canvas pixels with y growing downward, so gravity is +y and
# a rising shell has negative vertical velocity.

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from config import (
    CONFETTI_GRAVITY, CONFETTI_PRUNE_MARGIN, FIREWORK_GRAVITY,
    SPARK_COUNT, SPARK_DAMPING, SPARK_DECAY, SPARK_LIFESPAN,
)

logger = logging.getLogger(__name__)

SHELL = "shell"
SPARK = "spark"


@dataclass(frozen=True)
class ConfettiPiece:
    x: float
    y: float
    size: float
    color: Tuple[int, int, int]
    rotation: float


@dataclass(frozen=True)
class FireworkPoint:
    kind: str   # SHELL or SPARK
    x: float
    y: float
    hue: float
    lifespan: int
    size: float


class ConfettiShower:
    """Falling rectangles spawned above the visible area.

    State is kept column-wise in one float array so a tick is a handful of
    vectorised updates.
    """
    X, Y, VX, VY, SIZE, ROT, SPIN = range(7)

    def __init__(self, width: float, height: float, *, gravity: float = CONFETTI_GRAVITY,
                 margin: float = CONFETTI_PRUNE_MARGIN, rng: Optional[np.random.Generator] = None):
        self.width, self.height = width, height
        self.gravity = gravity
        self.margin = margin
        self.rng = rng if rng is not None else np.random.default_rng()
        self._p = np.zeros((0, 7))
        self._colors = np.zeros((0, 3), dtype=int)

    def resize(self, width: float, height: float):
        self.width, self.height = width, height

    def spawn(self, n: int):
        if n <= 0:
            return
        rng = self.rng
        lo = min(50.0, self.width / 2)
        p = np.empty((n, 7))
        p[:, self.X] = rng.uniform(lo, max(lo, self.width - 50), n)
        p[:, self.Y] = rng.uniform(-80, -10, n)
        p[:, self.VX] = rng.uniform(-0.6, 0.6, n)
        p[:, self.VY] = rng.uniform(1, 4, n)
        p[:, self.SIZE] = rng.uniform(6, 12, n)
        p[:, self.ROT] = rng.uniform(0, 2 * math.pi, n)
        p[:, self.SPIN] = rng.uniform(-0.1, 0.1, n)
        self._p = np.vstack([self._p, p])
        self._colors = np.vstack([self._colors, rng.integers(50, 256, size=(n, 3))])

    def tick(self):
        p = self._p
        if not len(p):
            return
        p[:, self.X] += p[:, self.VX]
        p[:, self.Y] += p[:, self.VY]
        p[:, self.VY] += self.gravity
        p[:, self.ROT] += p[:, self.SPIN]
        keep = p[:, self.Y] <= self.height + self.margin
        if not keep.all():
            self._p = p[keep]
            self._colors = self._colors[keep]

    def clear(self):
        self._p = self._p[:0]
        self._colors = self._colors[:0]

    def is_exhausted(self) -> bool:
        return len(self._p) == 0

    def __len__(self):
        return len(self._p)

    def particles(self) -> List[ConfettiPiece]:
        return [
            ConfettiPiece(x=float(row[self.X]), y=float(row[self.Y]), size=float(row[self.SIZE]),
                          color=tuple(int(c) for c in col), rotation=float(row[self.ROT]))
            for row, col in zip(self._p, self._colors)
        ]


@dataclass
class Shell:
    x: float
    y: float
    vx: float
    vy: float
    ax: float = 0.0
    ay: float = 0.0

    def apply_force(self, fx: float, fy: float):
        self.ax += fx
        self.ay += fy

    def update(self):
        self.vx += self.ax
        self.vy += self.ay
        self.x += self.vx
        self.y += self.vy
        self.ax = self.ay = 0.0


class Sparks:
    """Post-detonation particles: damped, gravity-bound, fading out."""

    def __init__(self, x: float, y: float, n: int, rng: np.random.Generator, *,
                 damping: float = SPARK_DAMPING, lifespan: int = SPARK_LIFESPAN,
                 decay: int = SPARK_DECAY):
        angle = rng.uniform(0, 2 * math.pi, n)
        speed = rng.uniform(2, 10, n)
        self.pos = np.tile(np.array([x, y], dtype=float), (n, 1))
        self.vel = np.column_stack([np.cos(angle), np.sin(angle)]) * speed[:, None]
        self.acc = np.zeros((n, 2))
        self.lifespan = np.full(n, lifespan, dtype=int)
        self.damping = damping
        self.decay = decay

    def apply_force(self, fx: float, fy: float):
        self.acc += (fx, fy)

    def update(self):
        self.vel *= self.damping
        self.lifespan -= self.decay
        self.vel += self.acc
        self.pos += self.vel
        self.acc[:] = 0.0
        alive = self.lifespan >= 0
        if not alive.all():
            self.pos, self.vel = self.pos[alive], self.vel[alive]
            self.acc, self.lifespan = self.acc[alive], self.lifespan[alive]

    def __len__(self):
        return len(self.lifespan)


class Firework:
    """A shell that rises until it stops climbing, then bursts into sparks.

    Detonation is a velocity guard (vy >= 0), not a timer. Shell and sparks
    share one hue picked at launch.
    """

    def __init__(self, x: float, y: float, hue: float, vy: float, rng: np.random.Generator, *,
                 gravity: float = FIREWORK_GRAVITY, spark_count: int = SPARK_COUNT):
        self.hue = hue
        self.rng = rng
        self.gravity = gravity
        self.spark_count = spark_count
        self.shell = Shell(x=x, y=y, vx=0.0, vy=vy)
        self.sparks: Optional[Sparks] = None

    @property
    def exploded(self) -> bool:
        return self.sparks is not None

    def update(self):
        if not self.exploded:
            self.shell.apply_force(0.0, self.gravity)
            self.shell.update()
            if self.shell.vy >= 0:
                self.explode()
        if self.sparks is not None:
            self.sparks.apply_force(0.0, self.gravity)
            self.sparks.update()

    def explode(self):
        self.sparks = Sparks(self.shell.x, self.shell.y, self.spark_count, self.rng)
        logger.debug("firework burst at (%.0f, %.0f)", self.shell.x, self.shell.y)

    def done(self) -> bool:
        return self.exploded and len(self.sparks) == 0

    def points(self) -> List[FireworkPoint]:
        if not self.exploded:
            return [FireworkPoint(SHELL, self.shell.x, self.shell.y, self.hue, SPARK_LIFESPAN, 8)]
        return [
            FireworkPoint(SPARK, float(x), float(y), self.hue, int(life), 6)
            for (x, y), life in zip(self.sparks.pos, self.sparks.lifespan)
        ]


class FireworkShow:
    def __init__(self, width: float, height: float, *, gravity: float = FIREWORK_GRAVITY,
                 rng: Optional[np.random.Generator] = None):
        self.width, self.height = width, height
        self.gravity = gravity
        self.rng = rng if rng is not None else np.random.default_rng()
        self.fireworks: List[Firework] = []

    def resize(self, width: float, height: float):
        self.width, self.height = width, height

    def trigger(self, n: int = 1):
        for _ in range(max(0, n)):
            self.fireworks.append(Firework(
                x=float(self.rng.uniform(0, self.width)), y=float(self.height),
                hue=float(self.rng.uniform(0, 360)), vy=float(self.rng.uniform(-12, -8)),
                rng=self.rng, gravity=self.gravity,
            ))

    def tick(self):
        for fw in self.fireworks:
            fw.update()
        self.fireworks = [fw for fw in self.fireworks if not fw.done()]

    def clear(self):
        self.fireworks = []

    def is_exhausted(self) -> bool:
        return not self.fireworks

    def points(self) -> List[FireworkPoint]:
        out = []
        for fw in self.fireworks:
            out.extend(fw.points())
        return out


class ParticleEngine:
    """Both celebration effects behind one per-frame tick."""

    def __init__(self, width: float, height: float, rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        self.confetti = ConfettiShower(width, height, rng=rng)
        self.fireworks = FireworkShow(width, height, rng=rng)

    def resize(self, width: float, height: float):
        self.confetti.resize(width, height)
        self.fireworks.resize(width, height)

    def celebrate(self, confetti: int, fireworks: int = 0):
        self.confetti.spawn(confetti)
        self.fireworks.trigger(fireworks)

    def tick(self):
        self.confetti.tick()
        self.fireworks.tick()

    def is_exhausted(self) -> bool:
        return self.confetti.is_exhausted() and self.fireworks.is_exhausted()
