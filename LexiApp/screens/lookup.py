import webbrowser

from kivy.clock import Clock
from kivy.core.window import Window
from kivy.graphics import Color, Rectangle
from kivy.logger import Logger
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.label import Label
from kivy.uix.popup import Popup
from kivy.uix.scrollview import ScrollView
from kivy.uix.textinput import TextInput
from kivy.uix.widget import Widget
from kivy.utils import escape_markup

from LexiApp import settings
from LexiApp.render import EntryView, MeaningView, PageView
from LexiApp.ui.widgets import AutoHeightLabel, RoundedButton as Button, TagRow


class LookupScreen(BoxLayout):
    """Kivy side of the app: forwards user input to the controller and draws ``PageView``s."""

    def __init__(self, controller, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'vertical'
        self.padding = 20
        self.spacing = 14
        self.controller = controller
        self.controller.on_change = self.refresh
        self.theme = settings.THEMES["light"]
        self._notice_popup = None

        with self.canvas.before:
            self._bg_color = Color(*self.theme["bg"])
            self.rect = Rectangle(size=self.size, pos=self.pos)
        self.bind(size=self._update_rect, pos=self._update_rect)

        self._build_ui()
        self.refresh()

    # ---- UI building ----
    def _build_ui(self):
        header = BoxLayout(orientation='horizontal', size_hint=(1, None), height=64, spacing=8)
        self.title_label = Label(text="[b]Dictionary[/b]", markup=True, font_size=34, halign='left', valign='middle')
        self.title_label.bind(size=lambda inst, v: setattr(inst, 'text_size', v))
        header.add_widget(self.title_label)

        toggle = BoxLayout(size_hint=(None, 1), width=120)
        self.sun_icon = Button(text="Light", font_size=20, background_color=self.theme["primary"])
        self.moon_icon = Button(text="Dark", font_size=20, background_color=self.theme["primary"])
        self.sun_icon.bind(on_release=lambda *_: self.controller.toggle_theme())
        self.moon_icon.bind(on_release=lambda *_: self.controller.toggle_theme())
        self._theme_toggle = toggle
        header.add_widget(toggle)
        self.add_widget(header)

        search_row = BoxLayout(size_hint=(1, None), height=56, spacing=8)
        self.search_input = TextInput(hint_text="Enter a word...", multiline=False, font_size=24)
        self.search_input.bind(on_text_validate=self._on_submit)
        self.search_button = Button(text=settings.LABEL_SEARCH, size_hint=(None, 1), width=180,
                                    font_size=24, background_color=self.theme["primary"])
        self.search_button.bind(on_release=self._on_submit)
        search_row.add_widget(self.search_input)
        search_row.add_widget(self.search_button)
        self.add_widget(search_row)

        sv = ScrollView(size_hint=(1, 1))
        self.content = GridLayout(cols=1, spacing=12, size_hint_y=None, padding=(0, 6))
        self.content.bind(minimum_height=self.content.setter('height'))
        sv.add_widget(self.content)
        self.add_widget(sv)

    def _update_rect(self, instance, value):
        self.rect.pos = instance.pos
        self.rect.size = instance.size

    # ---- input ----
    def _on_submit(self, *_):
        self.controller.submit(self.search_input.text)

    def _on_save(self, *_):
        self.controller.save()

    # ---- drawing ----
    def refresh(self, *_):
        self.apply(self.controller.view())

    def apply(self, page: PageView):
        self._apply_theme(page)
        self.search_button.text = page.search.label
        self.search_button.disabled = not page.search.enabled

        c = self.content
        c.clear_widgets()
        if page.show_error:
            self._add_banner(page.error_text or "", self.theme["danger"])
        if page.show_loading:
            self._add_text(settings.LABEL_SEARCHING, 24, self.theme["muted"], halign='center')
        if page.show_welcome:
            self._add_text(settings.MSG_WELCOME, 24, self.theme["muted"], halign='center')
        if page.show_word and page.entry is not None:
            c.add_widget(self._build_entry(page.entry))
        if page.saved_words.visible:
            c.add_widget(self._build_saved_words(page.saved_words.words))

        if page.notice and self._notice_popup is None:
            self._show_notice(page.notice)

    def _apply_theme(self, page: PageView):
        self.theme = settings.THEMES[page.theme.palette]
        self._bg_color.rgba = self.theme["bg"]
        Window.clearcolor = self.theme["bg"]
        self.title_label.color = self.theme["text"]
        self.search_input.background_color = self.theme["surface"]
        self.search_input.foreground_color = self.theme["text"]
        # exactly one of the two icons is on screen
        self._theme_toggle.clear_widgets()
        self._theme_toggle.add_widget(self.moon_icon if page.theme.show_moon else self.sun_icon)

    def _add_text(self, text, font_size, color, parent=None, halign='left', markup=False):
        lbl = AutoHeightLabel(text=text, font_size=font_size, color=color, halign=halign, markup=markup)
        (parent or self.content).add_widget(lbl)
        return lbl

    def _add_banner(self, text, rgba):
        box = BoxLayout(size_hint_y=None, padding=(12, 8))
        with box.canvas.before:
            Color(*rgba)
            bg = Rectangle(pos=box.pos, size=box.size)
        box.bind(pos=lambda inst, v: setattr(bg, 'pos', v), size=lambda inst, v: setattr(bg, 'size', v))
        lbl = AutoHeightLabel(text=text, font_size=22, color=(1, 1, 1, 1))
        lbl.bind(height=lambda inst, h: setattr(box, 'height', h + 16))
        box.add_widget(lbl)
        self.content.add_widget(box)

    def _section(self):
        grid = GridLayout(cols=1, spacing=6, size_hint_y=None)
        grid.bind(minimum_height=grid.setter('height'))
        return grid

    def _build_entry(self, entry: EntryView):
        t = self.theme
        box = self._section()
        box.padding = (12, 12)
        with box.canvas.before:
            Color(*(t["highlight"] if entry.highlighted else t["surface"]))
            bg = Rectangle(pos=box.pos, size=box.size)
        box.bind(pos=lambda inst, v: setattr(bg, 'pos', v), size=lambda inst, v: setattr(bg, 'size', v))

        head = BoxLayout(size_hint_y=None, height=72, spacing=8)
        word_lbl = Label(text=f"[b]{escape_markup(entry.word)}[/b]", markup=True, font_size=48, color=t["text"],
                         halign='left', valign='middle')
        word_lbl.bind(size=lambda inst, v: setattr(inst, 'text_size', v))
        head.add_widget(word_lbl)
        save_btn = Button(text=entry.save.label, size_hint=(None, None), size=(160, 52), font_size=22,
                          disabled=not entry.save.enabled,
                          background_color=t["success"] if entry.save.saved else t["primary"])
        save_btn.bind(on_release=self._on_save)
        head.add_widget(save_btn)
        box.add_widget(head)
        if entry.phonetic:
            self._add_text(entry.phonetic, 26, t["muted"], parent=box)

        if entry.audio.visible:
            row = BoxLayout(size_hint_y=None, height=48, spacing=8)
            for item in entry.audio.items:
                b = Button(text=item.label, size_hint=(None, 1), width=180, font_size=20,
                           background_color=t["primary"])
                b.bind(on_release=lambda _b, url=item.play_url: self.controller.play_audio(url))
                row.add_widget(b)
            row.add_widget(Widget())
            box.add_widget(row)

        for meaning in entry.meanings:
            box.add_widget(self._build_meaning(meaning))

        if entry.sources.visible:
            self._add_text(f"[b]{settings.LABEL_SOURCES}[/b]", 22, t["text"], parent=box, markup=True)
            for link in entry.sources.links:
                lbl = self._add_text(f"[ref={link.url}][u]{escape_markup(link.url)}[/u][/ref]", 20, t["primary"],
                                     parent=box, markup=True)
                lbl.bind(on_ref_press=lambda inst, ref: self._open_link(ref))
        return box

    def _build_meaning(self, meaning: MeaningView):
        t = self.theme
        block = self._section()
        self._add_text(f"[i][b]{escape_markup(meaning.part_of_speech)}[/b][/i]", 30, t["primary"], parent=block, markup=True)
        if meaning.definitions is not None:
            self._add_text(meaning.definitions.title, 22, t["muted"], parent=block)
            for item in meaning.definitions.items:
                self._add_text(item.text, 24, t["text"], parent=block)
                if item.example:
                    lbl = self._add_text(item.example, 20, t["muted"], parent=block)
                    lbl.padding = (24, 0)
        for tags in (meaning.synonyms, meaning.antonyms):
            if tags is None:
                continue
            self._add_text(tags.title, 22, t["muted"], parent=block)
            row = TagRow()
            row.set_tags(tags.tags, fill=t[tags.kind], color=t["text"])
            block.add_widget(row)
        return block

    def _build_saved_words(self, words):
        t = self.theme
        block = self._section()
        self._add_text(f"[b]{settings.LABEL_SAVED_WORDS}[/b]", 24, t["text"], parent=block, markup=True)
        row = TagRow()
        row.set_tags(words, fill=t["highlight"], color=t["text"])
        block.add_widget(row)
        return block

    def _open_link(self, url):
        # the browser gets the url only, no handle back to this window
        Logger.info(f"LexiApp: opening source {url}")
        webbrowser.open_new_tab(url)

    def _show_notice(self, message, duration: float = 2):
        popup = Popup(title='Audio', content=Label(text=message), size_hint=(0.8, 0.3))
        self._notice_popup = popup

        def _closed(*_):
            self._notice_popup = None
            self.controller.dismiss_notice()
        popup.bind(on_dismiss=_closed)
        popup.open()
        Clock.schedule_once(lambda *_: popup.dismiss(), duration)
