from bloc.state import Resolved, UNINITIALIZED
from ui.color_screen import ColorScreen


def test_layout_centers_swatch_and_buttons(config):
    screen = ColorScreen(config)

    assert screen.swatch.w == screen.swatch.h == 200
    assert screen.swatch.x == (400 - 200) // 2
    assert screen.swatch.y >= screen.app_bar.h

    blue, red = screen.buttons["blue"], screen.buttons["red"]
    assert (blue.w, blue.h) == (50, 30)
    assert red.x - (blue.x + blue.w) == 20
    assert blue.y == red.y == screen.swatch.y + 200 + 20
    # Row is centered under the swatch
    assert blue.x - screen.swatch.x == (screen.swatch.x + 200) - (red.x + red.w)


def test_render_size_and_mode(config):
    img = ColorScreen(config).render(UNINITIALIZED)
    assert img.size == (400, 480)
    assert img.mode == "RGB"


def test_render_swatch_color_follows_state(config):
    screen = ColorScreen(config)
    center = screen.swatch.center

    assert screen.render(UNINITIALIZED).getpixel(center) == config["colors"]["blue"]
    assert screen.render(Resolved(True)).getpixel(center) == config["colors"]["blue"]
    assert screen.render(Resolved(False)).getpixel(center) == config["colors"]["red"]


def test_render_buttons_and_background(config):
    screen = ColorScreen(config)
    img = screen.render(Resolved(False))

    # Button corners are clear of the label text
    blue, red = screen.buttons["blue"], screen.buttons["red"]
    assert img.getpixel((blue.x + 1, blue.y + 1)) == config["colors"]["blue"]
    assert img.getpixel((red.x + 1, red.y + 1)) == config["colors"]["red"]
    assert img.getpixel((2, screen.height - 2)) == config["colors"]["background"]
    assert img.getpixel((screen.width - 2, 2)) == config["colors"]["primary"]


def test_button_at_hits_and_misses(config):
    screen = ColorScreen(config)
    blue, red = screen.buttons["blue"], screen.buttons["red"]

    assert screen.button_at(*blue.center) == "blue"
    assert screen.button_at(*red.center) == "red"
    assert screen.button_at(blue.x, blue.y) == "blue"
    assert screen.button_at(blue.x + blue.w, blue.y) is None  # gap
    assert screen.button_at(red.x + red.w - 1, red.y + red.h - 1) == "red"
    assert screen.button_at(*screen.swatch.center) is None
    assert screen.button_at(0, 0) is None


def test_layout_follows_config(config):
    config["window"]["width"] = 600
    config["swatch"]["size"] = 300
    screen = ColorScreen(config)

    assert screen.swatch.x == 150
    assert screen.swatch.w == 300
    assert screen.render(Resolved(False)).size == (600, 480)
