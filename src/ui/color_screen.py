"""The colorz screen.

Renders a color state as a PIL image: an app bar with the title, a square
swatch showing the current color, and a row with the "blue" and "red"
buttons underneath. Also maps pointer positions back to those buttons.
"""

import logging
from PIL import Image, ImageDraw, ImageFont

from bloc.state import ColorState, display_is_blue

log = logging.getLogger("colorz.ui.color_screen")

BUTTON_NAMES = ("blue", "red")


class Box:
    """Axis-aligned rectangle in screen pixels."""

    __slots__ = ("x", "y", "w", "h")

    def __init__(self, x: int, y: int, w: int, h: int):
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def contains(self, px: int, py: int) -> bool:
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def center(self) -> tuple[int, int]:
        return self.x + self.w // 2, self.y + self.h // 2

    @property
    def corners(self) -> list[int]:
        # PIL rectangles include both end points
        return [self.x, self.y, self.x + self.w - 1, self.y + self.h - 1]


class ColorScreen:
    """Renders the swatch and the two color buttons."""

    def __init__(self, config: dict):
        window = config["window"]
        self.width = window["width"]
        self.height = window["height"]
        self.title = window["title"]
        self.colors = config["colors"]

        self.app_bar = Box(0, 0, self.width, config["app_bar"]["height"])
        self.swatch, self.buttons = self._layout(config)

        self._font: ImageFont.FreeTypeFont | None = None
        self._font_small: ImageFont.FreeTypeFont | None = None
        self._load_fonts()

    def _layout(self, config: dict) -> tuple[Box, dict[str, Box]]:
        size = config["swatch"]["size"]
        bw = config["button"]["width"]
        bh = config["button"]["height"]
        row_gap = config["spacing"]["row"]
        button_gap = config["spacing"]["buttons"]

        # Swatch and button row form one column centered in the body
        body_top = self.app_bar.h
        column_h = size + row_gap + bh
        top = body_top + max(0, (self.height - body_top - column_h) // 2)

        swatch = Box((self.width - size) // 2, top, size, size)

        row_w = bw * len(BUTTON_NAMES) + button_gap * (len(BUTTON_NAMES) - 1)
        x = (self.width - row_w) // 2
        y = top + size + row_gap
        buttons = {}
        for name in BUTTON_NAMES:
            buttons[name] = Box(x, y, bw, bh)
            x += bw + button_gap
        return swatch, buttons

    def _load_fonts(self) -> None:
        try:
            self._font = ImageFont.truetype(
                "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf", 20
            )
            self._font_small = ImageFont.truetype(
                "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", 12
            )
        except OSError:
            log.debug("DejaVu fonts not found, using default bitmap font")
            self._font = ImageFont.load_default()
            self._font_small = self._font

    def swatch_color(self, state: ColorState) -> tuple:
        return self.colors["blue"] if display_is_blue(state) else self.colors["red"]

    def render(self, state: ColorState) -> Image.Image:
        """Render the screen for the given state."""
        img = Image.new("RGB", (self.width, self.height), self.colors["background"])
        draw = ImageDraw.Draw(img)

        self._draw_app_bar(draw)

        draw.rectangle(self.swatch.corners, fill=self.swatch_color(state))

        for name, box in self.buttons.items():
            draw.rectangle(box.corners, fill=self.colors[name])
            draw.text(
                box.center, name,
                fill=self.colors["label"], font=self._font_small, anchor="mm",
            )

        return img

    def _draw_app_bar(self, draw: ImageDraw.ImageDraw) -> None:
        draw.rectangle(self.app_bar.corners, fill=self.colors["primary"])
        draw.text(
            (16, self.app_bar.h // 2), self.title,
            fill=self.colors["title"], font=self._font, anchor="lm",
        )

    def button_at(self, x: int, y: int) -> str | None:
        """Name of the button under (x, y), or None."""
        for name, box in self.buttons.items():
            if box.contains(x, y):
                return name
        return None
