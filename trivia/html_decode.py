# trivia/html_decode.py - HTML entity decoding for provider text

import html
import logging

logger = logging.getLogger(__name__)

# Enough for the doubly escaped text the provider occasionally sends
MAX_DECODE_PASSES = 5


def html_decoded(text: str) -> str:
    """
    Resolve named and numeric character references (&quot;, &#039;, &amp;...).

    Escaping is peeled until the text stops changing, so &amp;quot; ends up
    as a plain quote and decoding clean text is a no-op. If decoding fails
    the original text is returned untouched so a single bad field never
    costs the whole question.
    """
    try:
        decoded = text
        for _ in range(MAX_DECODE_PASSES):
            unescaped = html.unescape(decoded)
            if unescaped == decoded:
                break
            decoded = unescaped
        return decoded
    except Exception as e:
        logger.debug(f"Could not decode HTML entities in {text!r}: {e}")
        return text
