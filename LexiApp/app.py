from kivy.app import App
from kivy.core.window import Window
from kivy.logger import Logger

from LexiApp import settings
from LexiApp.controller import AppController
from LexiApp.models.saved_words import SavedWordStore
from LexiApp.screens.lookup import LookupScreen
from LexiApp.services.audio import AudioPlayer
from LexiApp.services.dictionary_api import DictionaryClient

Window.size = settings.WINDOW_SIZE


class LexiMainApp(App):
    title = "Dictionary"

    def build(self):
        self.client = DictionaryClient()
        self.audio = AudioPlayer()
        # saved words live only as long as this process
        self.controller = AppController(self.client, saved=SavedWordStore(), audio=self.audio)
        Logger.info(f"LexiApp: using {settings.API_BASE_URL}")
        return LookupScreen(self.controller)

    def on_stop(self):
        self.audio.stop()
        self.client.close()


def main():
    LexiMainApp().run()


if __name__ == "__main__":
    main()
