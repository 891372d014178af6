#!/usr/bin/env python
"""
Sliding Tile Puzzle GUI

A game-styled Tkinter GUI: pick an image, choose a level, shuffle and
slide the empty cell around with the arrow keys.
"""

import tkinter as tk
from tkinter import ttk, filedialog, scrolledtext
from PIL import ImageTk
import sys
import os

import cv2

from core.image_cache import ImageCache
from core.image_utils import to_pil
from core.splitting import split_image
from engine import RUNNER
from pipeline import DEFAULT_CONFIG, load_puzzle_image, new_puzzle


# Color scheme
COLORS = {
    'bg_dark': '#1a1a2e',
    'bg_medium': '#16213e',
    'bg_light': '#0f3460',
    'accent': '#e94560',
    'accent_hover': '#ff6b6b',
    'text': '#eaeaea',
    'text_dim': '#a0a0a0',
    'success': '#4ecca3',
    'error': '#ff6b6b',
}

BOARD_PIXELS = 480
PREVIEW_PIXELS = 200


def move_status(result, solved, was_solved):
    """
    Status bar update after a player move.
    
    Returns:
        (message, color key) or None to leave the status bar as it is
    """
    if not result.swapped:
        return None
    if solved:
        return "✅ Puzzle Solved!", 'success'
    if was_solved:
        return "Use the arrow keys to solve", 'text'
    return None


class TextRedirector:
    """Redirects stdout/stderr to a Tkinter text widget."""
    def __init__(self, widget, root):
        self.widget = widget
        self.root = root

    def write(self, text):
        self.root.after(0, lambda: self._write(text))

    def _write(self, text):
        self.widget.configure(state='normal')
        self.widget.insert(tk.END, text)
        self.widget.see(tk.END)
        self.widget.configure(state='disabled')

    def flush(self):
        pass


class SlidingPuzzleGUI:
    def __init__(self, root, config=DEFAULT_CONFIG):
        self.root = root
        self.config = config
        self.root.title("🧩 Sliding Puzzle")
        self.root.geometry("1000x750")
        self.root.minsize(800, 600)
        self.root.configure(bg=COLORS['bg_dark'])

        self.cache = ImageCache(limit=config.cache_limit)
        self.image = None
        self.session = None
        self.preview_photo = None
        self.tile_photos = []
        self.runner_photo = None
        self.cell_items = []
        self._debounce_id = None
        self._shuffling = False

        self._solved = False
        self._setup_styles()
        self._build_ui()
        self.root.bind('<KeyPress>', self._on_key)

    def _setup_styles(self):
        """Configure ttk styles for game-like appearance."""
        style = ttk.Style()
        style.theme_use('clam')

        style.configure('Dark.TFrame', background=COLORS['bg_dark'])

        style.configure('Game.TButton',
                        font=('Segoe UI', 11, 'bold'),
                        padding=(20, 12),
                        background=COLORS['accent'],
                        foreground='white')
        style.map('Game.TButton',
                  background=[('active', COLORS['accent_hover']),
                              ('disabled', '#555555')])

        style.configure('Secondary.TButton',
                        font=('Segoe UI', 10),
                        padding=(15, 10),
                        background=COLORS['bg_light'],
                        foreground='white')
        style.map('Secondary.TButton',
                  background=[('active', COLORS['bg_medium'])])

        style.configure('Title.TLabel',
                        font=('Segoe UI', 24, 'bold'),
                        background=COLORS['bg_dark'],
                        foreground=COLORS['text'])

        style.configure('Subtitle.TLabel',
                        font=('Segoe UI', 11),
                        background=COLORS['bg_dark'],
                        foreground=COLORS['text_dim'])

        style.configure('File.TLabel',
                        font=('Segoe UI', 10),
                        background=COLORS['bg_dark'],
                        foreground=COLORS['accent'])

    def _build_ui(self):
        main = ttk.Frame(self.root, style='Dark.TFrame', padding=20)
        main.pack(fill=tk.BOTH, expand=True)

        # Header
        header = ttk.Frame(main, style='Dark.TFrame')
        header.pack(fill=tk.X, pady=(0, 20))

        ttk.Label(header, text="🧩 Sliding Puzzle", style='Title.TLabel').pack(side=tk.LEFT)
        ttk.Label(header, text="Select an image, shuffle, then use the arrow keys!",
                  style='Subtitle.TLabel').pack(side=tk.LEFT, padx=(20, 0), pady=(8, 0))

        # Controls row
        ctrl = ttk.Frame(main, style='Dark.TFrame')
        ctrl.pack(fill=tk.X, pady=(0, 15))

        self.select_btn = ttk.Button(ctrl, text="📁 Select Image",
                                      style='Secondary.TButton', command=self._select_image)
        self.select_btn.pack(side=tk.LEFT, padx=(0, 10))

        self.shuffle_btn = ttk.Button(ctrl, text="🔀 Shuffle",
                                       style='Game.TButton', command=self._shuffle, state=tk.DISABLED)
        self.shuffle_btn.pack(side=tk.LEFT, padx=(0, 10))

        ttk.Label(ctrl, text="Level:", style='Subtitle.TLabel').pack(side=tk.LEFT, padx=(10, 5))
        self.level_var = tk.StringVar(value=str(self.config.grid_size))
        self.level_select = ttk.Combobox(ctrl, textvariable=self.level_var, width=6, state='readonly',
                                         values=[str(n) for n in self.config.level_choices])
        self.level_select.pack(side=tk.LEFT)
        self.level_select.bind('<<ComboboxSelected>>', self._on_level_change)

        self.file_label = ttk.Label(ctrl, text="No file selected", style='File.TLabel')
        self.file_label.pack(side=tk.RIGHT)

        # Content: Board (large) + preview/log (small)
        content = ttk.Frame(main, style='Dark.TFrame')
        content.pack(fill=tk.BOTH, expand=True)
        content.columnconfigure(0, weight=3)
        content.columnconfigure(1, weight=1)
        content.rowconfigure(0, weight=1)

        board_frame = tk.Frame(content, bg=COLORS['bg_medium'], bd=0, highlightthickness=2,
                               highlightbackground=COLORS['bg_light'])
        board_frame.grid(row=0, column=0, sticky='nsew', padx=(0, 10))

        tk.Label(board_frame, text="🖼 Board", font=('Segoe UI', 12, 'bold'),
                 bg=COLORS['bg_medium'], fg=COLORS['text']).pack(anchor=tk.W, padx=15, pady=(15, 10))

        self.canvas = tk.Canvas(board_frame, width=BOARD_PIXELS, height=BOARD_PIXELS,
                                bg=COLORS['bg_dark'], highlightthickness=0)
        self.canvas.pack(padx=15, pady=(0, 15))
        self.canvas.create_text(BOARD_PIXELS // 2, BOARD_PIXELS // 2,
                                text="Your puzzle will appear here",
                                fill=COLORS['text_dim'], font=('Segoe UI', 11))

        side = tk.Frame(content, bg=COLORS['bg_medium'], bd=0, highlightthickness=2,
                        highlightbackground=COLORS['bg_light'])
        side.grid(row=0, column=1, sticky='nsew')

        tk.Label(side, text="🎯 Original", font=('Segoe UI', 10, 'bold'),
                 bg=COLORS['bg_medium'], fg=COLORS['text']).pack(anchor=tk.W, padx=10, pady=(10, 5))
        self.preview_label = tk.Label(side, bg=COLORS['bg_dark'])
        self.preview_label.pack(padx=10)

        tk.Label(side, text="📋 Log", font=('Segoe UI', 10, 'bold'),
                 bg=COLORS['bg_medium'], fg=COLORS['text']).pack(anchor=tk.W, padx=10, pady=(10, 5))
        self.log_text = scrolledtext.ScrolledText(
            side, wrap=tk.WORD, state='disabled',
            font=('Consolas', 8), height=10, width=30,
            bg=COLORS['bg_dark'], fg=COLORS['text'],
            insertbackground=COLORS['text'],
            selectbackground=COLORS['accent'],
            bd=0, highlightthickness=0
        )
        self.log_text.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 10))

        # Status bar
        status_frame = tk.Frame(main, bg=COLORS['bg_medium'], height=40)
        status_frame.pack(fill=tk.X, pady=(15, 0))
        status_frame.pack_propagate(False)

        self.status_label = tk.Label(status_frame, text="Select an image to start",
                                      font=('Segoe UI', 10), bg=COLORS['bg_medium'],
                                      fg=COLORS['text'], anchor=tk.W, padx=15)
        self.status_label.pack(fill=tk.BOTH, expand=True)

    def _log(self, msg):
        self.log_text.configure(state='normal')
        self.log_text.insert(tk.END, msg + "\n")
        self.log_text.see(tk.END)
        self.log_text.configure(state='disabled')

    def _set_status(self, msg, color=None):
        self.status_label.config(text=msg, fg=color or COLORS['text'])

    def _select_image(self):
        filetypes = [("Image files", "*.jpg *.jpeg *.png *.bmp *.webp"), ("All files", "*.*")]
        path = filedialog.askopenfilename(title="Select Image", filetypes=filetypes)
        if path:
            self._load_image(path)

    def _load_image(self, path):
        filename = os.path.basename(path)
        self.shuffle_btn.config(state=tk.DISABLED)
        self._set_status("Processing image...", COLORS['accent'])
        self.root.update_idletasks()

        old_stdout = sys.stdout
        sys.stdout = TextRedirector(self.log_text, self.root)
        try:
            self.image = load_puzzle_image(path, cache=self.cache, config=self.config, verbose=True)
        except (OSError, ValueError) as e:
            self._log(f"❌ Error: {e}")
            self._set_status("❌ Error processing image", COLORS['error'])
            return
        finally:
            sys.stdout = old_stdout

        self.file_label.config(text=f"📄 {filename}")
        self._show_preview()
        self._new_puzzle()
        self.shuffle_btn.config(state=tk.NORMAL)
        self._set_status(f"Image loaded: {filename}")

    def _show_preview(self):
        preview = cv2.resize(self.image, (PREVIEW_PIXELS, PREVIEW_PIXELS), interpolation=cv2.INTER_AREA)
        self.preview_photo = ImageTk.PhotoImage(to_pil(preview))
        self.preview_label.config(image=self.preview_photo)

    def _on_level_change(self, event=None):
        # Keep arrow keys for the board, not the combobox
        self.root.focus_set()
        if self._debounce_id is not None:
            self.root.after_cancel(self._debounce_id)
        self._debounce_id = self.root.after(self.config.debounce_ms, self._apply_level)

    def _apply_level(self):
        self._debounce_id = None
        if self.image is not None:
            self._new_puzzle()

    def _new_puzzle(self):
        """Replace the current session with a solved grid at the selected level."""
        level = int(self.level_var.get())
        self.session = new_puzzle(self.image, level, config=self.config)
        self._solved = False
        self.session.engine.add_listener(self._on_move)
        self._log(f"New {level}x{level} puzzle")
        self._build_board()

    def _build_board(self):
        size = self.session.size
        cell = BOARD_PIXELS // size
        display = cv2.resize(self.image, (cell * size, cell * size), interpolation=cv2.INTER_AREA)

        self.tile_photos = [ImageTk.PhotoImage(to_pil(tile)) for tile in split_image(display, size)]
        runner = display[:cell, :cell].copy()
        runner[:] = self.config.runner_color
        self.runner_photo = ImageTk.PhotoImage(to_pil(runner))

        self.canvas.delete('all')
        self.cell_items = []
        grid = self.session.grid
        for index in range(grid.total_cells):
            r, c = grid.position_of(index)
            item = self.canvas.create_image(c * cell, r * cell, anchor=tk.NW,
                                            image=self._photo_for(index))
            self.cell_items.append(item)

    def _photo_for(self, index):
        tile = self.session.grid.tile_at(index)
        if tile is RUNNER:
            return self.runner_photo
        return self.tile_photos[tile]

    def _on_move(self, result):
        for index in result.cells:
            self.canvas.itemconfig(self.cell_items[index], image=self._photo_for(index))

    def _on_key(self, event):
        if self.session is None or self._shuffling:
            return
        result = self.session.move(event.keysym)
        solved = self.session.is_solved()
        status = move_status(result, solved, self._solved)
        if status is not None:
            message, color = status
            if solved:
                self._log(message)
            self._set_status(message, COLORS[color])
        if result.swapped:
            self._solved = solved

    def _shuffle(self):
        if self.session is None:
            return
        self._shuffling = True
        try:
            self.session.shuffle()
        finally:
            self._shuffling = False
        self._solved = self.session.is_solved()
        self._log(f"Shuffled ({self.session.shuffler.moves} moves)")
        self._set_status("Shuffled - use the arrow keys to solve", COLORS['accent'])


def main():
    root = tk.Tk()
    app = SlidingPuzzleGUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()
