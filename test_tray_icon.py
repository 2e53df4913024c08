import unittest
from datetime import date
from types import SimpleNamespace

try:
    import tray_icon
except Exception:  # pystray picks a desktop backend at import time
    tray_icon = None


@unittest.skipIf(tray_icon is None, "no pystray backend available")
class RefreshTrayTests(unittest.TestCase):
    def test_refresh_after_midnight(self) -> None:
        icon = SimpleNamespace(icon=None, title="Today is Wednesday")
        tray_icon.refresh_tray(icon, date(2024, 2, 29))
        self.assertEqual(icon.title, "Today is Thursday")
        self.assertEqual(icon.icon.size, (64, 64))


if __name__ == "__main__":
    unittest.main()
