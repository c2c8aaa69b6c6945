"""
Text processing utilities for the team roster system.
"""

import re
import unicodedata


class TextUtils:
    """Utilities for text processing and normalization."""
    
    @staticmethod
    def sort_key(name: str) -> str:
        """Case-insensitive key for ordering names alphabetically."""
        if not name:
            return ""
        return name.casefold().strip()
    
    @staticmethod
    def safe_filename(text: str) -> str:
        """Turn a team or report name into a lowercase file name fragment."""
        normalized = unicodedata.normalize('NFKD', text or "").encode('ascii', 'ignore').decode('ascii')
        normalized = re.sub(r'[^A-Za-z0-9 _-]', '', normalized).strip()
        normalized = re.sub(r'[\s-]+', '_', normalized)
        return normalized.lower() or "unnamed"
