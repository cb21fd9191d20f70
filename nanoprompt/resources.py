"""Fixed resource locations."""

PREMIUM_URL = "https://supermaker.ai/blog/nano-banana-pro-prompt-use-cases-ready-to-copy-paste/"


def get_premium_url() -> str:
    """Return the URL for premium nano-banana-pro prompt resources."""
    return PREMIUM_URL
