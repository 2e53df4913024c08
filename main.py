"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import logging
import threading
from datetime import date

from calendar_logic import today_message
from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from tray_icon import create_tray, refresh_tray

logger = logging.getLogger(__name__)

# How often the main loop checks whether the date has rolled over
_DATE_CHECK_MS = 60_000


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(today_message())

    cal_win = CalendarWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_next_month() -> None:
        def _next() -> None:
            cal_win.navigate(1)
            if cal_win.is_hidden():
                cal_win.show()
        cal_win.root.after(0, _next)

    def on_today() -> None:
        def _today() -> None:
            cal_win.go_today()
            refresh_tray(tray)
        cal_win.root.after(0, _today)

    def on_exit() -> None:
        def _quit() -> None:
            logger.info("Exiting")
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit,
                       on_next_month=on_next_month, on_today=on_today)

    last_day = date.today()

    def watch_date() -> None:
        nonlocal last_day
        today = date.today()
        if today != last_day:
            last_day = today
            logger.info("Date changed: %s", today_message(today))
            refresh_tray(tray, today)
            cal_win.refresh()
        cal_win.root.after(_DATE_CHECK_MS, watch_date)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Tray icon started")

    cal_win.show()
    cal_win.root.after(_DATE_CHECK_MS, watch_date)
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
