"""Provider catalogue and pipeline limits."""

OPENAI_URL = "https://api.openai.com/v1"

VOICES = [
    {"label": "Alloy", "value": "alloy"},
    {"label": "Echo", "value": "echo"},
    {"label": "Fable", "value": "fable"},
    {"label": "Onyx", "value": "onyx"},
    {"label": "Nova", "value": "nova"},
    {"label": "Shimmer", "value": "shimmer"},
]

MODELS = [
    {"label": "GPT-4o Mini TTS", "value": "gpt-4o-mini-tts"},
    {"label": "TTS-1", "value": "tts-1"},
    {"label": "TTS-1 HD", "value": "tts-1-hd"},
]

DEFAULT_MODEL = "tts-1"
DEFAULT_VOICE = "alloy"

# USD per million characters
PRICES_PER_MILLION = {
    "gpt-4o-mini-tts": 12.0,
    "tts-1": 15.0,
    "tts-1-hd": 30.0,
}

INPUT_PRICES_PER_MILLION = {
    "gpt-4o-mini-tts": 0.5,
    "tts-1": 0.0,
    "tts-1-hd": 0.0,
}

MAX_CHUNK_CHARS = 4096
REQUESTS_PER_MINUTE = 100
RATE_WINDOW_SECONDS = 60.0

AUDIO_MEDIA_TYPE = "audio/mpeg"

AUDIO_KEY_PURPOSE = "audio"
CHUNK_KEY_PURPOSE = "chunk"
CREDENTIAL_STORE_KEY = "apiKey"


def estimate_cost(text: str, model: str) -> float:
    """Estimate the USD cost of synthesizing text with a model.

    Unknown models are priced at zero.
    """
    output_price = PRICES_PER_MILLION.get(model, 0.0)
    input_price = INPUT_PRICES_PER_MILLION.get(model, 0.0)
    return len(text) / 1_000_000 * (output_price + input_price)
