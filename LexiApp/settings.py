API_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"
REQUEST_TIMEOUT = 10.0

WINDOW_SIZE = (900, 1000)

# User-facing texts
MSG_NOT_FOUND = "Word not found. Please try another word."
MSG_CONNECTIVITY = "Failed to fetch word definition. Please check your connection and try again."
MSG_AUDIO = "Unable to play audio pronunciation."
MSG_WELCOME = "Search for any English word to see its definitions, pronunciation and more."

LABEL_SEARCH = "Search"
LABEL_SEARCHING = "Searching..."
LABEL_SAVE = "Save Word"
LABEL_SAVED = "Saved"
LABEL_PLAY_AUDIO = "Play Audio"
LABEL_DEFINITIONS = "Definitions:"
LABEL_SYNONYMS = "Synonyms:"
LABEL_ANTONYMS = "Antonyms:"
LABEL_SOURCES = "Source"
LABEL_SAVED_WORDS = "Saved Words"

THEMES = {
    "light": {
        "bg": (0.96, 0.97, 0.99, 1),
        "surface": (1, 1, 1, 1),
        "text": (0.10, 0.12, 0.16, 1),
        "muted": (0.40, 0.44, 0.50, 1),
        "primary": (0.20, 0.52, 0.90, 1),
        "success": (0.25, 0.65, 0.38, 1),
        "danger": (0.85, 0.32, 0.35, 1),
        "synonym": (0.80, 0.92, 0.84, 1),
        "antonym": (0.96, 0.84, 0.84, 1),
        "highlight": (1.00, 0.96, 0.80, 1),
    },
    "dark": {
        "bg": (0.07, 0.08, 0.10, 1),
        "surface": (0.12, 0.14, 0.18, 1),
        "text": (0.95, 0.98, 1, 1),
        "muted": (0.78, 0.82, 0.88, 1),
        "primary": (0.20, 0.52, 0.90, 1),
        "success": (0.25, 0.65, 0.38, 1),
        "danger": (0.85, 0.32, 0.35, 1),
        "synonym": (0.16, 0.34, 0.22, 1),
        "antonym": (0.40, 0.16, 0.18, 1),
        "highlight": (0.28, 0.24, 0.10, 1),
    },
}
