#!/usr/bin/env python3
# layout.py: screen regions for the quiz canvas, derived from viewport size

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


@dataclass(frozen=True)
class Layout:
    width: float
    height: float
    options: List[Rect]
    next_button: Rect
    restart_button: Rect
    export_button: Rect


def compute_layout(width: float, height: float) -> Layout:
    margin = width * 0.05
    start_y = height * 0.25
    h = height * 0.1
    spacing = h * 1.2
    options = [Rect(margin, start_y + i*spacing, width - margin*2, h) for i in range(4)]

    next_btn = Rect(width - 160 - 40, height - 80, 160, 44)

    bw, bh = width * 0.15, height * 0.06
    restart_btn = Rect(width - bw - width*0.05, height - bh - height*0.05, bw, bh)
    export_btn = Rect(restart_btn.x - bw - width*0.02, restart_btn.y, bw, bh)
    return Layout(width, height, options, next_btn, restart_btn, export_btn)


def hit_option(layout: Layout, x: float, y: float) -> Optional[int]:
    for i, r in enumerate(layout.options):
        if r.contains(x, y):
            return i
    return None
