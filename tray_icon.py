"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from calendar_logic import today_message
from icon_gen import create_icon_image


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_next_month: Callable[[], None] | None = None,
    on_today: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
    ]
    if on_next_month is not None:
        items.append(MenuItem("Next Month", lambda _icon, _item: on_next_month()))
    if on_today is not None:
        items.append(MenuItem("Today", lambda _icon, _item: on_today()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    return pystray.Icon("month-grid-calendar", icon_image, today_message(), menu)


def refresh_tray(icon: pystray.Icon, today: date | None = None) -> None:
    """Redraw the day-number image and tooltip, e.g. after midnight."""
    icon.icon = create_icon_image(today)
    icon.title = today_message(today)
