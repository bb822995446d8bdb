from kivy.uix.button import Button
from kivy.uix.label import Label
from kivy.uix.stacklayout import StackLayout
from kivy.properties import NumericProperty, ListProperty
from kivy.graphics import Color, RoundedRectangle


class RoundedButton(Button):
    corner_radius = NumericProperty(12)

    def __init__(self, **kwargs):
        kwargs.setdefault("background_normal", "")
        kwargs.setdefault("background_down", "")
        super().__init__(**kwargs)
        # the stock rectangle is drawn transparent, the rounded one replaces it
        self._fill = list(self.background_color)
        self.background_color = (0, 0, 0, 0)
        with self.canvas.before:
            self._fill_instr = Color(*self._fill)
            self._bg = RoundedRectangle(pos=self.pos, size=self.size, radius=[self.corner_radius])
        self.bind(pos=self._update_canvas, size=self._update_canvas,
                  state=self._update_canvas, disabled=self._update_canvas)
        self._update_canvas()

    def on_corner_radius(self, *_):
        self._update_canvas()

    def _update_canvas(self, *_):
        if not hasattr(self, "_bg"):
            return
        r, g, b, a = self._fill
        if self.disabled:
            a *= 0.5
        elif self.state == "down":
            r, g, b = r * 0.8, g * 0.8, b * 0.8
        self._fill_instr.rgba = (r, g, b, a)
        self._bg.pos = self.pos
        self._bg.size = self.size
        self._bg.radius = [self.corner_radius]


class AutoHeightLabel(Label):
    """Wrapping label whose height follows its text."""

    extra_pad = NumericProperty(6)

    def __init__(self, **kwargs):
        kwargs.setdefault("size_hint_y", None)
        kwargs.setdefault("halign", "left")
        kwargs.setdefault("valign", "top")
        super().__init__(**kwargs)
        self.bind(width=lambda inst, w: setattr(inst, "text_size", (w, None)))
        self.bind(texture_size=lambda inst, ts: setattr(inst, "height", ts[1] + self.extra_pad))


class TagChip(Label):
    """Small rounded tag used for synonyms, antonyms and saved words."""

    fill = ListProperty([0.8, 0.9, 0.84, 1])

    def __init__(self, **kwargs):
        kwargs.setdefault("size_hint", (None, None))
        kwargs.setdefault("padding", (12, 6))
        super().__init__(**kwargs)
        with self.canvas.before:
            self._fill_instr = Color(*self.fill)
            self._bg = RoundedRectangle(pos=self.pos, size=self.size, radius=[10])
        self.bind(texture_size=lambda inst, ts: setattr(inst, "size", ts))
        self.bind(pos=self._update_canvas, size=self._update_canvas, fill=self._update_canvas)

    def _update_canvas(self, *_):
        self._fill_instr.rgba = self.fill
        self._bg.pos = self.pos
        self._bg.size = self.size


class TagRow(StackLayout):
    """Left-to-right flowing row of chips that grows in height as needed."""

    def __init__(self, **kwargs):
        kwargs.setdefault("orientation", "lr-tb")
        kwargs.setdefault("spacing", 6)
        kwargs.setdefault("size_hint_y", None)
        super().__init__(**kwargs)
        self.bind(minimum_height=self.setter("height"))

    def set_tags(self, tags, fill, color):
        self.clear_widgets()
        for t in tags:
            self.add_widget(TagChip(text=t, fill=fill, color=color))
