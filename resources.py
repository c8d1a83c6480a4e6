# resources.py: built-in question bank used when no usable file is found
# Rows use the same keys as questions.csv.

FALLBACK_ROWS = [
    {"question": "Which sketch function runs only once when the program starts?",
     "A": "setup()", "B": "draw()", "C": "preload()", "D": "mousePressed()",
     "answer": "A", "feedback": "Correct! setup() runs once at program start."},
    {"question": "Which function runs repeatedly to redraw the canvas?",
     "A": "setup()", "B": "draw()", "C": "mouseClicked()", "D": "keyTyped()",
     "answer": "B", "feedback": "Correct! draw() keeps running to update the frame."},
    {"question": "Which function loads external files (images, CSV) before setup?",
     "A": "createCanvas()", "B": "background()", "C": "preload()", "D": "fill()",
     "answer": "C", "feedback": "Correct! preload() loads external files ahead of time."},
    {"question": "Which function sets the canvas size?",
     "A": "setSize()", "B": "canvas()", "C": "createCanvas()", "D": "window()",
     "answer": "C", "feedback": "Correct! createCanvas() sets the canvas size."},
    {"question": "Which function changes the fill colour of shapes?",
     "A": "fill()", "B": "stroke()", "C": "rect()", "D": "color()",
     "answer": "A", "feedback": "Correct! fill() sets the fill colour."},
    {"question": "Where is the canvas origin (0, 0)?",
     "A": "Top-left corner", "B": "Bottom-right corner", "C": "Centre", "D": "Bottom-left corner",
     "answer": "A", "feedback": "Correct! The origin is the top-left corner."},
]
