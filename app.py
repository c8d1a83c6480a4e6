#!/usr/bin/env python3
# app.py: Quiz Burst (GUI) with:
# - five random questions per attempt, one at a time
# - score, remark and per-question feedback on submit
# - confetti (and fireworks on a perfect score) above the celebration threshold
# Requires: numpy, reportlab

import argparse
import colorsys
import logging
import math
import os
import random
from datetime import datetime
import tkinter as tk
from tkinter import ttk, messagebox, filedialog, simpledialog

import numpy as np

from certificate import generate_certificate
from config import APP_TITLE, CELEBRATION_THRESHOLD_DEFAULT, FRAME_MS, SPARK_LIFESPAN
from layout import compute_layout, hit_option
from particles import ParticleEngine, SHELL
from question_bank import load_bank
from quiz_engine import LETTERS, QUIZ, RESULT, UNANSWERED, QuizEngine, celebration_plan

logger = logging.getLogger(__name__)

BG = (245, 245, 245)


def _hex(rgb):
    return "#%02x%02x%02x" % tuple(max(0, min(255, int(v))) for v in rgb)


def _spark_color(hue: float, lifespan: int) -> str:
    # tk has no alpha channel; fade toward the background instead
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, 0.55, 1.0)
    a = max(0.0, min(1.0, lifespan / SPARK_LIFESPAN))
    return _hex([c*255*a + bg*(1-a) for c, bg in zip((r, g, b), BG)])


class QuizApp(ttk.Frame):
    def __init__(self, master, questions_path=None, threshold=CELEBRATION_THRESHOLD_DEFAULT, seed=None):
        super().__init__(master)
        self.pack(fill="both", expand=True)
        self.user_name = ""

        toolbar = ttk.Frame(self); toolbar.pack(fill="x", padx=6, pady=(6,2))
        ttk.Button(toolbar, text="Load Question Bank…", command=self.load_questions).pack(side="left", padx=4)
        self.thr_var = tk.StringVar(value=str(threshold))
        ttk.Label(toolbar, text="Celebrate at score ≥").pack(side="left", padx=(18,4))
        ttk.Entry(toolbar, textvariable=self.thr_var, width=4).pack(side="left")
        self.status = tk.StringVar(value="")
        ttk.Label(toolbar, textvariable=self.status, foreground="#666").pack(side="left", padx=18)

        self.canvas = tk.Canvas(self, bg=_hex(BG), highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)
        self.canvas.bind("<Button-1>", self.on_press)
        self.canvas.bind("<Configure>", self.on_resize)

        self.layout = compute_layout(1000, 700)
        self.particles = ParticleEngine(1000, 700, rng=np.random.default_rng(seed))
        self.engine = QuizEngine(load_bank(questions_path), threshold=self._threshold(threshold),
                                 rng=random.Random(seed))
        self.status.set(f"{len(self.engine.all_questions)} questions in bank.")
        self.after_id = None
        self.loop()

    def _threshold(self, default=CELEBRATION_THRESHOLD_DEFAULT):
        try:
            return max(0, int(self.thr_var.get()))
        except ValueError:
            return default

    # ---------------- Input ----------------
    def load_questions(self):
        path = filedialog.askopenfilename(filetypes=[("CSV", "*.csv"), ("JSON", "*.json")])
        if not path: return
        bank = load_bank(path)
        self.engine = QuizEngine(bank, threshold=self._threshold(), rng=self.engine.rng)
        self.status.set(f"{len(bank)} questions in bank ({os.path.basename(path)}).")

    def on_resize(self, event):
        self.layout = compute_layout(event.width, event.height)
        self.particles.resize(event.width, event.height)

    def on_press(self, event):
        x, y = event.x, event.y
        if self.engine.state == QUIZ:
            i = hit_option(self.layout, x, y)
            if i is not None:
                self.engine.select_answer(i)
            elif self.layout.next_button.contains(x, y):
                self.engine.threshold = self._threshold()
                if self.engine.advance() and self.engine.state == RESULT:
                    self.on_submitted()
        elif self.engine.state == RESULT:
            if self.layout.restart_button.contains(x, y):
                self.engine.restart()
            elif self.layout.export_button.contains(x, y):
                self.export_result()

    def on_submitted(self):
        confetti, fireworks = celebration_plan(self.engine.result)
        if confetti or fireworks:
            logger.debug("celebrating with %d confetti, %d fireworks", confetti, fireworks)
            self.particles.celebrate(confetti, fireworks)

    def export_result(self):
        result = self.engine.result
        if result is None:
            messagebox.showwarning("No results", "Finish a quiz first."); return
        self.user_name = simpledialog.askstring("Your name", "Enter your name for the summary:",
                                                initialvalue=self.user_name) or ""
        path = filedialog.asksaveasfilename(defaultextension=".pdf", filetypes=[("PDF","*.pdf")],
                                            initialfile="quiz_result.pdf")
        if not path: return
        try:
            generate_certificate(self.user_name, self.engine.session.items, result, datetime.now(), path)
        except OSError as e:
            messagebox.showerror("Export error", str(e)); return
        messagebox.showinfo("Saved", f"Saved: {path}")

    # ---------------- Frame loop ----------------
    def loop(self):
        self.particles.tick()
        self.render()
        self.after_id = self.after(FRAME_MS, self.loop)

    def render(self):
        c = self.canvas
        c.delete("all")
        if self.engine.state == QUIZ:
            self.draw_quiz()
        else:
            self.draw_result()
        self.draw_particles()

    def draw_quiz(self):
        c, L = self.canvas, self.layout
        s = self.engine.session
        c.create_text(20, 12, text=f"Random multiple-choice quiz ({len(s.items)} questions)",
                      anchor="nw", font=("Arial", 20), fill="#1e1e1e")
        q = self.engine.current()
        if q is None:
            c.create_text(40, 60, text="No questions to answer. Press Submit.", anchor="nw",
                          font=("Arial", 18), fill="#0a0a0a")
        else:
            c.create_text(L.width - 160, 16, text=f"Question {s.index+1} / {len(s.items)}", anchor="nw",
                          font=("Arial", 14), fill="#5a5a5a")
            c.create_text(40, 60, text=q.question, anchor="nw", width=L.width - 80,
                          font=("Arial", 18), fill="#0a0a0a")
            chosen = s.current_answer()
            for i, r in enumerate(L.options):
                sel = chosen == i
                c.create_rectangle(r.x, r.y, r.x+r.w, r.y+r.h, outline="#969696",
                                   fill="#3c96dc" if sel else "#ffffff")
                c.create_text(r.x+12, r.y+12, text=f"{LETTERS[i]}. {q.choices[i]}", anchor="nw",
                              width=r.w-24, font=("Arial", 16), fill="#ffffff" if sel else "#1e1e1e")

        b = L.next_button
        c.create_rectangle(b.x, b.y, b.x+b.w, b.y+b.h, outline="",
                           fill="#28a745" if self.engine.can_advance() else "#999999")
        c.create_text(b.x+b.w/2, b.y+b.h/2, text="Next" if not s.is_last() else "Submit",
                      font=("Arial", 13), fill="#ffffff")
        c.create_text(40, L.height-60, text="Click an option to choose, then the button at the bottom right.",
                      anchor="nw", font=("Arial", 10), fill="#505050")

    def draw_result(self):
        c, L = self.canvas, self.layout
        res = self.engine.result
        W, H = L.width, L.height
        c.create_text(W*0.05, H*0.05, text="Quiz result", anchor="nw",
                      font=("Arial", max(8, int(H*0.04))), fill="#1e1e1e")
        c.create_text(W/2, H*0.2, text=f"{res.score} / {res.total}",
                      font=("Arial", max(8, int(H*0.09))), fill="#1e1e1e")
        c.create_text(W/2, H*0.3, text=res.remark, font=("Arial", max(8, int(H*0.03))), fill="#505050")

        line_h = H*0.08
        small = max(7, int(H*0.016))
        for i, (q, e) in enumerate(zip(self.engine.session.items, res.entries)):
            x, y = W*0.05, H*0.4 + i*line_h
            c.create_rectangle(x-6, y-6, x-6+W*0.9, y-6+line_h-8, outline="",
                               fill="#dcffe6" if e.correct else "#ffe6e6")
            c.create_text(x, y, text=f"{i+1}. {q.question}", anchor="nw",
                          font=("Arial", max(7, int(H*0.02))), fill="#1e1e1e")
            yours = "Not answered" if e.user_choice == UNANSWERED else q.choice_label(e.user_choice)
            c.create_text(x, y+line_h*0.4, text=f"Your answer: {yours}", anchor="nw",
                          font=("Arial", small), fill="#1e1e1e")
            c.create_text(x+W*0.35, y+line_h*0.4, text=f"Feedback: {e.feedback}", anchor="nw",
                          width=W*0.5, font=("Arial", small), fill="#1e1e1e")

        for b, label, color in ((L.restart_button, "Restart quiz", "#007bff"),
                                (L.export_button, "Export PDF", "#6c757d")):
            c.create_rectangle(b.x, b.y, b.x+b.w, b.y+b.h, outline="", fill=color)
            c.create_text(b.x+b.w/2, b.y+b.h/2, text=label, font=("Arial", max(7, int(H*0.02))),
                          fill="#ffffff")

    def draw_particles(self):
        c = self.canvas
        for p in self.particles.confetti.particles():
            hw, hh = p.size/2, p.size*0.3
            cos, sin = math.cos(p.rotation), math.sin(p.rotation)
            pts = []
            for dx, dy in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)):
                pts += [p.x + dx*cos - dy*sin, p.y + dx*sin + dy*cos]
            c.create_polygon(*pts, fill=_hex(p.color), outline="")
        for p in self.particles.fireworks.points():
            r = p.size/2
            fill = _spark_color(p.hue, p.lifespan if p.kind != SHELL else SPARK_LIFESPAN)
            c.create_oval(p.x-r, p.y-r, p.x+r, p.y+r, fill=fill, outline="")


def main(argv=None):
    ap = argparse.ArgumentParser(description=APP_TITLE)
    ap.add_argument("--questions", default="questions.csv", help="CSV or JSON question bank")
    ap.add_argument("--threshold", type=int, default=CELEBRATION_THRESHOLD_DEFAULT,
                    help="minimum score that triggers the celebration")
    ap.add_argument("--seed", type=int, default=None, help="seed for reproducible draws")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    root = tk.Tk()
    root.title(APP_TITLE)
    QuizApp(root, questions_path=args.questions, threshold=args.threshold, seed=args.seed)
    root.minsize(800, 600)
    root.mainloop()

if __name__ == "__main__":
    main()
