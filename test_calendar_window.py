import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from calendar_logic import MonthKey

try:
    import calendar_window
except ImportError:  # tkinter not built into this interpreter
    calendar_window = None


def _window(key: MonthKey, state: str = "withdrawn"):
    """A CalendarWindow with Tk replaced by mocks (no display needed)."""
    win = object.__new__(calendar_window.CalendarWindow)
    win.root = MagicMock()
    win.root.state.return_value = state
    win.root.winfo_viewable.return_value = state != "withdrawn"
    win.render = MagicMock()
    win._position_window = MagicMock()
    win._saved_width = None
    win._saved_height = None
    win.key = key
    return win


@unittest.skipIf(calendar_window is None, "tkinter unavailable")
class CalendarWindowTests(unittest.TestCase):
    def test_showing_keeps_navigated_month(self) -> None:
        win = _window(MonthKey(2026, 10))
        win.navigate(1)
        win.toggle()
        self.assertEqual(win.key, MonthKey(2026, 11))
        win.root.deiconify.assert_called_once()
        self.assertEqual(win.render.call_args.args[0].key, MonthKey(2026, 11))

    def test_navigate_across_year_end(self) -> None:
        win = _window(MonthKey(2024, 12))
        win.navigate(1)
        self.assertEqual(win.key, MonthKey(2025, 1))
        self.assertEqual(win.render.call_args.args[0].month_name, "January")

    def test_go_today_resets_month(self) -> None:
        win = _window(MonthKey(1999, 5))
        win.go_today()
        self.assertEqual(win.key, MonthKey.today())

    def test_toggle_hides_visible_window(self) -> None:
        win = _window(MonthKey(2024, 2), state="normal")
        win.toggle()
        win.root.withdraw.assert_called_once()
        win.root.deiconify.assert_not_called()

    def test_resized_window_size_is_persisted_on_hide(self) -> None:
        win = _window(MonthKey(2024, 2), state="normal")
        win.root.winfo_width.return_value = 420
        win.root.winfo_height.return_value = 360
        win._on_configure(SimpleNamespace(widget=win.root))

        defaults = {"window_width": None, "window_height": None, "show_adjacent_days": True}
        with patch.object(calendar_window, "load_settings", return_value=dict(defaults)), \
                patch.object(calendar_window, "save_settings") as save:
            win.hide()
        saved = save.call_args.args[0]
        self.assertEqual((saved["window_width"], saved["window_height"]), (420, 360))

    def test_child_configure_events_are_ignored(self) -> None:
        win = _window(MonthKey(2024, 2))
        win._on_configure(SimpleNamespace(widget=object()))
        self.assertIsNone(win._saved_width)


if __name__ == "__main__":
    unittest.main()
