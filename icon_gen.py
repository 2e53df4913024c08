"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import Weekday, weekday_of

ACCENT = "#0078D4"


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA tear-off calendar page showing today's day number.

    The top band is accent-coloured; Sundays get a red band instead.
    """
    size = 64
    band = 16
    today = today or date.today()
    text = str(today.day)
    is_sunday = weekday_of(today.year, today.month, today.day) is Weekday.SUNDAY

    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, band - 1), fill="#CC0000" if is_sunday else ACCENT)
    draw.rectangle((0, 0, size - 1, size - 1), outline="#333333")

    # Find the largest font size that fits below the band
    avail_h = size - band - 4
    font_size = 60
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 6 and bbox[3] - bbox[1] <= avail_h:
            break
        font_size -= 1

    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band + (size - band - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
