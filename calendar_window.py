"""Single-month calendar window (tkinter)."""

import logging
from datetime import date
from tkinter import font as tkfont
import tkinter as tk

from calendar_logic import WEEKDAY_NAMES, MonthKey, MonthView, month_view, today_message
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
ADJACENT_FG = "#AAAAAA"
WEEKEND_FG = "#CC0000"

MAX_WEEKS = 6


class _GridPanel:
    """Pre-allocated label pool: weekday header + 6 weeks of day cells."""

    __slots__ = ("frame", "day_headers", "day_cells")

    def __init__(self, parent: tk.Frame, fonts: dict) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.day_headers: list[tk.Label] = []
        for col, name in enumerate(WEEKDAY_NAMES):
            fg = WEEKEND_FG if col in (0, 6) else "#333333"
            lbl = tk.Label(
                self.frame, text=name[:3], font=fonts["bold"], bg=GRID_BG, fg=fg, width=4,
            )
            lbl.grid(row=0, column=col, pady=(0, 2))
            self.day_headers.append(lbl)

        self.day_cells: list[list[tk.Label]] = []
        for r in range(MAX_WEEKS):
            row_cells: list[tk.Label] = []
            for c in range(7):
                cell = tk.Label(
                    self.frame, font=fonts["normal"], bg=GRID_BG, width=4, pady=3,
                )
                cell.grid(row=r + 1, column=c)
                row_cells.append(cell)
            self.day_cells.append(row_cells)


class CalendarWindow:
    """Month calendar with previous / next / today navigation."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title(self._title())
        self.root.resizable(True, True)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        settings = load_settings()
        self._show_adjacent: bool = settings["show_adjacent_days"]
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        # The only navigation state: replaced, never mutated
        self.key: MonthKey = MonthKey.today()

        self._month_label: tk.Label | None = None
        self._year_label: tk.Label | None = None
        self._footer_label: tk.Label | None = None
        self._build_shell()
        self._panel = _GridPanel(self._grid_frame, {
            "bold": self.font_bold, "normal": self.font_normal,
        })
        self._panel.frame.pack()
        self.render(month_view(self.key))

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.bind("<Left>", lambda _e: self.navigate(-1))
        self.root.bind("<Right>", lambda _e: self.navigate(1))
        self.root.bind("<Home>", lambda _e: self.go_today())
        self.root.bind("<Configure>", self._on_configure)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=10)
        self.font_bold = tkfont.Font(family=base, size=10, weight="bold")
        self.font_header = tkfont.Font(family=base, size=13, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    @staticmethod
    def _title() -> str:
        return f"Month Grid Calendar  {today_message()}"

    # ------------------------------------------------------------------
    # Build shell (once) — nav bar + grid placeholder + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        self._outer = tk.Frame(self.root, bg=GRID_BG)
        self._outer.pack(padx=8, pady=6)

        # Navigation row: ◀  Month Year  ▶
        nav = tk.Frame(self._outer, bg=HEADER_BG)
        nav.pack(fill="x", pady=(0, 4))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self.navigate(-1))

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self.navigate(1))

        title = tk.Frame(nav, bg=HEADER_BG)
        title.pack(expand=True)
        self._month_label = tk.Label(
            title, font=self.font_header, bg=HEADER_BG, fg="#333333",
        )
        self._month_label.pack(side="left")
        self._year_label = tk.Label(
            title, font=self.font_header, bg=HEADER_BG, fg="#333333",
        )
        self._year_label.pack(side="left", padx=(6, 0))

        self._grid_frame = tk.Frame(self._outer, bg=GRID_BG)
        self._grid_frame.pack()

        footer = tk.Frame(self._outer, bg=GRID_BG)
        footer.pack(fill="x", pady=(4, 0))
        self._footer_label = tk.Label(
            footer, font=self.font_footer, bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(side="left")
        btn_today = tk.Label(
            footer, text="Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(side="right")
        btn_today.bind("<Button-1>", lambda _e: self.go_today())

    # ------------------------------------------------------------------
    # Render a MonthView into the pooled labels (no widget creation)
    # ------------------------------------------------------------------
    def render(self, view: MonthView) -> None:
        self._month_label.configure(text=view.month_name)
        self._year_label.configure(text=view.year_text)
        self._footer_label.configure(text=f"Today: {date.today().strftime('%d.%m.%Y')}")

        today = date.today()
        is_this_month = view.key == (today.year, today.month)
        weeks = view.weeks()

        for r in range(MAX_WEEKS):
            row_cells = weeks[r] if r < len(weeks) else []
            for c in range(7):
                lbl = self._panel.day_cells[r][c]
                if c >= len(row_cells):
                    lbl.configure(text="", bg=GRID_BG)
                    continue
                cell = row_cells[c]
                if not cell.in_current_month:
                    text = str(cell.day) if self._show_adjacent else ""
                    lbl.configure(text=text, bg=GRID_BG, fg=ADJACENT_FG,
                                  font=self.font_normal)
                elif is_this_month and cell.day == today.day:
                    lbl.configure(text=str(cell.day), bg=ACCENT, fg="white",
                                  font=self.font_bold)
                else:
                    fg = WEEKEND_FG if c in (0, 6) else "black"
                    lbl.configure(text=str(cell.day), bg=GRID_BG, fg=fg,
                                  font=self.font_normal)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def navigate(self, delta: int) -> None:
        self.key = self.key.shift(delta)
        logger.debug("Showing %04d-%02d", self.key.year, self.key.month)
        self.render(month_view(self.key))

    def go_today(self) -> None:
        self.key = MonthKey.today()
        self.refresh()

    def refresh(self) -> None:
        """Redraw the current month, e.g. to move the today highlight."""
        self.root.title(self._title())
        self.render(month_view(self.key))

    # ------------------------------------------------------------------
    # Track window size (persisted on hide)
    # ------------------------------------------------------------------
    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.root:
            return
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()

    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def is_hidden(self) -> bool:
        return self.root.state() == "withdrawn" or not self.root.winfo_viewable()

    def toggle(self) -> None:
        if self.is_hidden():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        """Bring the window up on the selected month; only go_today() resets it."""
        self.root.title(self._title())
        self.root.deiconify()
        self.root.update_idletasks()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self._saved_width is not None and self._saved_height is not None:
            self._persist_size()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = max(self.root.winfo_reqwidth(), self._saved_width or 0)
        win_h = max(self.root.winfo_reqheight(), self._saved_height or 0)
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
