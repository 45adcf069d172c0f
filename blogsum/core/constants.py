"""Application-wide constants."""

# ---------------------------------------------------------------------------
# Page fetching
# ---------------------------------------------------------------------------
DEFAULT_USER_AGENT = "Mozilla/5.0"
DEFAULT_FETCH_TIMEOUT_SECONDS = 20.0

# ---------------------------------------------------------------------------
# Text extraction
# ---------------------------------------------------------------------------
MAX_CONTENT_CHARS = 12_000  # prompt budget, characters not tokens
WORDS_PER_MINUTE = 200
NON_CONTENT_TAGS = ("script", "style", "noscript", "template")

# ---------------------------------------------------------------------------
# Completion service
# ---------------------------------------------------------------------------
DEFAULT_COMPLETION_MODEL = "gemini-2.5-flash"
DEFAULT_COMPLETION_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

SUMMARY_PROMPT = "Summarize this blog in 5 clear sentences:\n\n{text}"
TRANSLATION_PROMPT = "Translate the following summary into formal Urdu:\n\n{summary}"

# ---------------------------------------------------------------------------
# HTTP contract
# ---------------------------------------------------------------------------
API_VERSION = "1"
GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."
