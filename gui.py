"""
GUI for PocketCalc
Tkinter-based keypad and display
"""
import tkinter as tk
from tkinter import ttk
import json
import config
import keymap
from calculator import Calculator
from database import Database
from history_manager import HistoryManager

BUTTON_ROWS = [
    [("MC", "mode"), ("MR", "mode"), ("M+", "mode"), ("M-", "mode")],
    [("C", "danger"), ("⌫", "normal"), ("√", "operator"), ("÷", "operator")],
    [("7", "normal"), ("8", "normal"), ("9", "normal"), ("×", "operator")],
    [("4", "normal"), ("5", "normal"), ("6", "normal"), ("−", "operator")],
    [("1", "normal"), ("2", "normal"), ("3", "normal"), ("+", "operator")],
    [("%", "operator"), ("0", "normal"), (".", "normal"), ("=", "equals")],
]


class PocketCalcGUI:
    def __init__(self, root, db=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        # Initialize components
        self.db = db or Database()
        self.calculator = Calculator()
        self.history_manager = HistoryManager(self.db)
        self.history_manager.attach(self.calculator)

        # ── Theme state (load before any widget is created) ───────────────
        settings = self._load_settings()
        self.dark_mode: bool = settings.get("dark_mode", False)
        self.T: dict = config.get_theme(self.dark_mode)
        self._apply_ttk_styles()
        self.root.configure(bg=self.T["bg"])

        self.history_visible = False

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)

    # ── Settings persistence ─────────────────────────────────────────────
    _SETTINGS_FILE = "settings.json"

    def _load_settings(self):
        try:
            with open(self._SETTINGS_FILE, "r") as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}

    def _save_settings(self, data):
        existing = self._load_settings()
        existing.update(data)
        with open(self._SETTINGS_FILE, "w") as f:
            json.dump(existing, f, indent=2)

    # ── Theme helpers ──────────────────────────────────────────────────────────
    def _apply_ttk_styles(self):
        """Configure ttk widget styles for the active neumorphic palette."""
        T = self.T
        style = ttk.Style()
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass
        style.configure("Vertical.TScrollbar",
                        background=T["shadow_dark"], troughcolor=T["display_bg"],
                        borderwidth=0, relief="flat", width=10, arrowsize=0)

    def apply_theme(self):
        """Refresh T, re-style ttk, then destroy+rebuild all widgets."""
        self.T = config.get_theme(self.dark_mode)
        self._apply_ttk_styles()
        self.root.configure(bg=self.T["bg"])
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()

    def _toggle_dark_mode(self):
        """Persist dark_mode setting and apply theme immediately."""
        self.dark_mode = not self.dark_mode
        self._save_settings({"dark_mode": self.dark_mode})
        self.apply_theme()

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["accent"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "mode":
            bg, fg, abg = T["mode_bg"], T["mode_fg"], T["shadow_dark"]
        elif kind == "danger":
            bg, fg, abg = T["danger"], "#FFFFFF", T["bg_dark"]
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    def create_widgets(self):
        """Create main UI components"""
        T = self.T
        # Top bar
        top_frame = tk.Frame(self.root, bg=T["bg_dark"], height=36)
        top_frame.pack(fill=tk.X, padx=2, pady=2)
        tk.Label(top_frame, text=config.APP_NAME,
                 font=(config.LABEL_FONT[0], 12, "bold"),
                 bg=T["bg_dark"], fg=T["accent"]).pack(side=tk.LEFT, padx=8)
        self._neu_btn(top_frame, "☾" if not self.dark_mode else "☀",
                      command=self._toggle_dark_mode, kind="mode",
                      font=config.LABEL_FONT).pack(side=tk.RIGHT, padx=2)
        self._neu_btn(top_frame, "History", command=self.toggle_history, kind="mode",
                      font=config.LABEL_FONT).pack(side=tk.RIGHT, padx=2)

        # Display area — inset card with LCD-style font
        display_frame = tk.Frame(self.root, bg=T["display_bg"])
        display_frame.pack(fill=tk.X, padx=6, pady=(4, 6))

        self.memory_label = tk.Label(
            display_frame, text="",
            font=(config.LABEL_FONT[0], 9, "bold"),
            bg=T["display_bg"], fg=T["subtext"], anchor=tk.W, padx=8
        )
        self.memory_label.pack(side=tk.TOP, fill=tk.X)

        self.display = tk.Label(
            display_frame, text=self.calculator.display_text,
            font=config.DISPLAY_FONT,
            bg=T["display_bg"], fg=T["display_fg"],
            anchor=tk.E, padx=12, pady=6
        )
        self.display.pack(side=tk.TOP, fill=tk.X)

        # History list (hidden until toggled)
        self.history_frame = tk.Frame(self.root, bg=T["bg"])
        self.history_list = tk.Listbox(
            self.history_frame, height=6,
            bg=T["listbox_bg"], fg=T["listbox_fg"],
            font=config.LABEL_FONT, relief=tk.FLAT, bd=0
        )
        history_sb = ttk.Scrollbar(self.history_frame, orient=tk.VERTICAL,
                                   command=self.history_list.yview)
        self.history_list.configure(yscrollcommand=history_sb.set)
        self.history_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        history_sb.pack(side=tk.RIGHT, fill=tk.Y)
        if self.history_visible:
            self.history_frame.pack(fill=tk.X, padx=6, pady=(0, 6))
            self.refresh_history()

        # Keypad
        keypad = tk.Frame(self.root, bg=T["bg"])
        keypad.pack(fill=tk.BOTH, expand=True, padx=5, pady=3)
        for r, row in enumerate(BUTTON_ROWS):
            keypad.grid_rowconfigure(r, weight=1)
            for c, (label, kind) in enumerate(row):
                keypad.grid_columnconfigure(c, weight=1, uniform="col")
                btn = self._neu_btn(keypad, label, kind=kind,
                                    command=lambda key=label: self.calculator_button_click(key))
                btn.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)

        self.update_display(self.calculator.display_text)

    def calculator_button_click(self, button):
        """Handle calculator button clicks"""
        text = keymap.dispatch_key(self.calculator, button)
        if text is None:
            return
        self.update_display(text)
        if self.history_visible:
            self.refresh_history()

    def on_key_press(self, event):
        """Handle keyboard input"""
        # event.char for printable keys, keysym for Return/BackSpace/Escape
        key = event.char if event.char and event.char.isprintable() else event.keysym
        text = keymap.dispatch_key(self.calculator, key)
        if text is None:
            return
        self.update_display(text)
        if self.history_visible:
            self.refresh_history()

    def update_display(self, text):
        """Update the display"""
        self.display.config(text=str(text))
        self.memory_label.config(text="M" if self.calculator.has_memory else "")

    def toggle_history(self):
        """Show or hide the calculation history"""
        self.history_visible = not self.history_visible
        if self.history_visible:
            self.history_frame.pack(fill=tk.X, padx=6, pady=(0, 6), after=self.display.master)
            self.refresh_history()
        else:
            self.history_frame.pack_forget()

    def refresh_history(self):
        """Reload the history list from the database"""
        self.history_list.delete(0, tk.END)
        for line in self.history_manager.format_calculation_history():
            self.history_list.insert(tk.END, line)
