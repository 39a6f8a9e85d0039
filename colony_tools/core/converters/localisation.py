"""
Merges the per-locale translation files into id -> {locale: text} tables.

Each file under <input>/localization is named after its locale
(e.g. de-DE.json) and holds creator names under sentences.npcs.pipliz and
item names under types. Untranslated placeholders are dropped, and the
static translations from config fill ids the game files do not carry.

Usage:
    result = convert_localisation_files("path/to/gamedata")
    result.translations.items["wheat"]["de-DE"]   # "Weizen"
"""

import os
import re
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Set

from colony_tools.core.config import (
    EXPECTED_STATIC_LOCALES,
    JSON_FILE_EXTENSION,
    MISSING_TRANSLATION_PREFIX,
    STATIC_TRANSLATIONS,
    get_localisation_path,
)
from colony_tools.core.errors import LocaleError, MissingFileError
from colony_tools.core import file_system
from colony_tools.core.parsers import read_json_files
from colony_tools.core.schemas import LOCALISATION_SCHEMA

# language[-Script][-REGION], e.g. "de", "zh-TW", "sr-Latn-RS", "es-419"
_LOCALE_RE = re.compile(r'^[a-z]{2,3}(-[a-z]{4})?(-([a-z]{2}|[0-9]{3}))?$', re.IGNORECASE)


@dataclass
class Translations:
    creators: Dict[str, Dict[str, str]] = field(default_factory=dict)
    items: Dict[str, Dict[str, str]] = field(default_factory=dict)


class LocalisationResult(NamedTuple):
    locales: Set[str]
    translations: Translations


def parse_locale(filepath):
    """Returns the locale tag a localisation file is named after."""
    filename = os.path.basename(filepath)
    locale = filename[:-len(JSON_FILE_EXTENSION)] if filename.endswith(JSON_FILE_EXTENSION) else filename
    if not _LOCALE_RE.match(locale):
        raise LocaleError(f"Invalid localisation file name: {filename}")
    return locale


def _add_translations(target, entries, locale):
    for key, text in entries.items():
        if text.startswith(MISSING_TRANSLATION_PREFIX):
            continue
        target.setdefault(key, {})[locale] = text


def flatten_localisation_data(localisation_data):
    """
    Merges [(locale, Localisation), ...] into a single Translations table.
    """
    flattened = Translations()
    for locale, data in localisation_data:
        _add_translations(flattened.creators, data.sentences.npcs.pipliz, locale)
        _add_translations(flattened.items, data.types, locale)
    return flattened


def merge_static_translations(translations):
    """Overlays game translations on top of the static table; game data wins per id."""
    return Translations(
        creators={**deepcopy(STATIC_TRANSLATIONS["creators"]), **translations.creators},
        items={**deepcopy(STATIC_TRANSLATIONS["items"]), **translations.items},
    )


def convert_localisation_files(input_dir):
    localisation_dir = get_localisation_path(input_dir)
    paths = file_system.find_files(localisation_dir, file_extension=JSON_FILE_EXTENSION)
    if not paths:
        raise MissingFileError("No localisation JSON files found in provided directory")

    locales = []
    seen = set()
    for path in paths:
        locale = parse_locale(path)
        if locale.lower() in seen:
            raise LocaleError(f"Duplicate localisation files found for locale: {locale}")
        seen.add(locale.lower())
        locales.append(locale)

    for locale in locales:
        if locale not in EXPECTED_STATIC_LOCALES:
            raise LocaleError(f"Valid locale found outside known static locales: {locale}")

    localisation_data = list(zip(locales, read_json_files(paths, LOCALISATION_SCHEMA)))
    translations = merge_static_translations(flatten_localisation_data(localisation_data))

    return LocalisationResult(locales=set(locales), translations=translations)
