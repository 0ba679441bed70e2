"""
Inspection helpers built on the character codec: per-token breakdowns,
vocabulary browsing and parsing of user-typed id lists
"""

import re
from typing import Dict, List, NamedTuple, Optional
from .data import CharacterCodec, DEFAULT_CODEC, SPECIAL_TOKENS, BOS_TOKEN, EOS_TOKEN
from .data import character_category


class TokenInfo(NamedTuple):
    """One vocabulary entry or one encoded character"""
    char: str
    id: int
    type: str


VOCABULARY_TYPES = ('special', 'lowercase', 'uppercase', 'number', 'punctuation', 'space', 'other')

DISPLAY_CHARS = {
    ' ': '␣',
    BOS_TOKEN: '⏵',
    EOS_TOKEN: '⏹',
}

# Leading signed ASCII integer of a list item, e.g. "55abc" -> 55
_LEADING_INT = re.compile(r'[+-]?[0-9]+')


def vocabulary_type(char: str) -> str:
    """Group a vocabulary symbol for display, splitting letters by case"""
    if char in SPECIAL_TOKENS:
        return 'special'
    category = character_category(char)
    if category == 'letter':
        return 'lowercase' if char.islower() else 'uppercase'
    return category


def display_char(char: str) -> str:
    return DISPLAY_CHARS.get(char, char)


def token_breakdown(text: str, codec: Optional[CharacterCodec] = None) -> List[TokenInfo]:
    """Describe each encodable character of the text, skipping unknown ones"""
    codec = codec or DEFAULT_CODEC
    return [TokenInfo(char, codec.char_to_idx[char], character_category(char))
            for char in text if char in codec.char_to_idx]


def parse_id_list(text: str, separator: str = ',') -> List[int]:
    """Parse a separated list of ids, dropping items that are not numbers"""
    ids = []
    for item in text.split(separator):
        match = _LEADING_INT.match(item.strip())
        if match:
            ids.append(int(match.group(0)))
    return ids


def format_ids(ids: List[int], separator: str = ', ') -> str:
    return '[' + separator.join(str(idx) for idx in ids) + ']'


class VocabularyBrowser:
    """Read-only view of the vocabulary with type filtering and search"""

    def __init__(self, codec: Optional[CharacterCodec] = None):
        self.codec = codec or DEFAULT_CODEC
        self._entries = [TokenInfo(char, idx, vocabulary_type(char))
                         for idx, char in sorted(self.codec.idx_to_char.items())]

    def entries(self) -> List[TokenInfo]:
        return list(self._entries)

    def filter(self, type_filter: str = 'all', search: str = '') -> List[TokenInfo]:
        """Entries of one type whose character or id contains the search term"""
        entries = self._entries
        if type_filter != 'all':
            entries = [entry for entry in entries if entry.type == type_filter]

        if search:
            term = search.lower()
            entries = [entry for entry in entries
                       if term in entry.char.lower() or term in str(entry.id)]

        return sorted(entries, key=lambda entry: entry.id)

    def stats(self) -> Dict[str, int]:
        counts = {vocab_type: 0 for vocab_type in VOCABULARY_TYPES}
        for entry in self._entries:
            counts[entry.type] += 1
        counts['total'] = len(self._entries)
        return counts
