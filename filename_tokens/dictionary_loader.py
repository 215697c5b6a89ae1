#!/usr/bin/env python3
"""
Dictionary loader utility for centralized configuration loading and caching.

Tokenizer settings live in JSON files under the package's ``dictionaries``
folder. Loading goes through this class so repeated lookups reuse the parsed
file instead of reading it again.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union


logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY = "tokenizer-options.json"


class DictionaryLoader:
    """Centralized dictionary loader with caching support."""

    # Cache for loaded dictionaries, keyed by resolved path
    _cache: Dict[str, Any] = {}

    @staticmethod
    def get_dictionary_path(dictionary_name: str = DEFAULT_DICTIONARY) -> Path:
        """
        Get the absolute path to a bundled dictionary file.

        Args:
            dictionary_name: Name of the dictionary file

        Returns:
            Absolute path to the dictionary file
        """
        return Path(__file__).resolve().parent / "dictionaries" / dictionary_name

    @classmethod
    def load_dictionary(
        cls,
        dictionary: Union[str, Path] = DEFAULT_DICTIONARY,
        use_cache: bool = True
    ) -> Optional[Any]:
        """
        Load a dictionary by bundled name or by explicit path.

        Args:
            dictionary: Bundled dictionary name, or a path to any JSON file
            use_cache: Whether to use cached version if available

        Returns:
            Parsed JSON contents, or None if the file is missing or malformed
        """
        path = Path(dictionary)
        if not path.is_absolute() and path.parent == Path("."):
            path = cls.get_dictionary_path(str(dictionary))
        cache_key = str(path)

        if use_cache and cache_key in cls._cache:
            return cls._cache[cache_key]

        try:
            with open(path, 'r', encoding='utf-8') as f:
                contents = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, OSError) as exc:
            logger.warning("Could not load dictionary %s: %s", path, exc)
            return None

        if use_cache:
            cls._cache[cache_key] = contents
        return contents

    @classmethod
    def get_section(
        cls,
        section_name: str,
        dictionary: Union[str, Path] = DEFAULT_DICTIONARY,
        use_cache: bool = True
    ) -> Any:
        """
        Load a specific section from a dictionary.

        Args:
            section_name: Name of the section to retrieve (e.g., 'allowed_delimiters')
            dictionary: Bundled dictionary name or path
            use_cache: Whether to use cached version if available

        Returns:
            The requested section, or None if the dictionary or section is missing
        """
        contents = cls.load_dictionary(dictionary, use_cache)
        if not isinstance(contents, dict):
            return None

        return contents.get(section_name)

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()
