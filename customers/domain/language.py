"""
Customer language detection from the Accept-Language header.
"""

from typing import List, Optional, Tuple

SUPPORTED_LANGUAGES = ("en", "es")
DEFAULT_LANGUAGE = "en"


class LanguageDetector:
    """Pick the customer's preferred supported language."""

    @staticmethod
    def _parse(header: str) -> List[Tuple[str, float]]:
        ranges = []
        for position, part in enumerate(header.split(",")):
            pieces = [p.strip() for p in part.split(";")]
            tag = pieces[0].lower()
            if not tag:
                continue
            quality = 1.0
            for param in pieces[1:]:
                if param.startswith("q="):
                    try:
                        quality = float(param[2:])
                    except ValueError:
                        quality = 0.0
            ranges.append((tag, quality, position))
        # stable on header order for equal weights
        ranges.sort(key=lambda item: (-item[1], item[2]))
        return [(tag, quality) for tag, quality, _ in ranges]

    @classmethod
    def detect(cls, accept_language: Optional[str]) -> str:
        """
        Detect the language to use for a customer.

        Args:
            accept_language: Raw Accept-Language header value

        Returns:
            A supported language code, ``en`` by default
        """
        if not accept_language:
            return DEFAULT_LANGUAGE

        for tag, quality in cls._parse(accept_language):
            if quality <= 0:
                continue
            primary = tag.split("-")[0]
            if primary in SUPPORTED_LANGUAGES:
                return primary

        return DEFAULT_LANGUAGE
