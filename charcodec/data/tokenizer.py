"""
Character-level codec over a fixed 74-symbol vocabulary
"""

import logging
from types import MappingProxyType
from typing import Iterable, List

logger = logging.getLogger(__name__)

BOS_TOKEN = '<BOS>'
EOS_TOKEN = '<EOS>'
SPECIAL_TOKENS = (BOS_TOKEN, EOS_TOKEN)

# Declaration order is the id assignment. Never reorder: callers store raw ids.
SYMBOLS = (
    list(SPECIAL_TOKENS)
    + [' ']
    + list('.,!?:;-\'"')
    + list('0123456789')
    + list('abcdefghijklmnopqrstuvwxyz')
    + list('ABCDEFGHIJKLMNOPQRSTUVWXYZ')
)

BOS_ID = 0
EOS_ID = 1
VOCAB_SIZE = len(SYMBOLS)

PUNCTUATION = frozenset('.!?,:;-\'"')


def character_category(char: str) -> str:
    """Classify a single character as space, punctuation, number, letter or other"""
    if char == ' ':
        return 'space'
    if char in PUNCTUATION:
        return 'punctuation'
    if len(char) == 1 and '0' <= char <= '9':
        return 'number'
    if len(char) == 1 and ('a' <= char <= 'z' or 'A' <= char <= 'Z'):
        return 'letter'
    return 'other'


def _build_tables(symbols=SYMBOLS):
    """Build the forward and reverse tables from one ordered declaration"""
    char_to_idx = {char: idx for idx, char in enumerate(symbols)}
    idx_to_char = {idx: char for char, idx in char_to_idx.items()}

    if len(char_to_idx) != len(symbols):
        raise ValueError("duplicate symbol in vocabulary")
    if char_to_idx.get(BOS_TOKEN) != BOS_ID or char_to_idx.get(EOS_TOKEN) != EOS_ID:
        raise ValueError(f"{BOS_TOKEN} and {EOS_TOKEN} must be declared first")

    return MappingProxyType(char_to_idx), MappingProxyType(idx_to_char)


_CHAR_TO_IDX, _IDX_TO_CHAR = _build_tables()


class CharacterCodec:
    """Character-level codec with BOS/EOS wrapping.

    The tables are built once at import time and shared read-only by every
    instance, so a single codec can be used from any number of threads.
    Both directions are total: characters outside the vocabulary are dropped
    by ``encode`` and ids without a table entry are dropped by ``decode``.
    """

    def __init__(self):
        self.char_to_idx = _CHAR_TO_IDX
        self.idx_to_char = _IDX_TO_CHAR
        self.bos_token = BOS_TOKEN
        self.eos_token = EOS_TOKEN
        self.vocab_size = VOCAB_SIZE
        logger.debug('Initialized character codec, vocab size: %d', self.vocab_size)

    @property
    def bos_token_id(self) -> int:
        return BOS_ID

    @property
    def eos_token_id(self) -> int:
        return EOS_ID

    def encode(self, text: str, wrap_special: bool = True) -> List[int]:
        """Convert text to token ids, skipping characters outside the vocabulary"""
        ids = [self.char_to_idx[char] for char in text if char in self.char_to_idx]

        if wrap_special:
            return [BOS_ID] + ids + [EOS_ID]
        return ids

    def decode(self, ids: Iterable[int]) -> str:
        """Convert token ids back to text.

        Unknown ids map to nothing and BOS/EOS are removed wherever they
        occur in the sequence.
        """
        chars = (self.idx_to_char.get(idx, '') for idx in ids)
        return ''.join(char for char in chars if char not in SPECIAL_TOKENS)

    def vocabulary_size(self) -> int:
        return self.vocab_size

    def supported_characters(self) -> List[str]:
        """All encodable characters in code point order"""
        return sorted(char for char in self.char_to_idx if char not in SPECIAL_TOKENS)

    def is_special(self, token_id: int) -> bool:
        return token_id in (BOS_ID, EOS_ID)

    # Exposed on the instance for callers that only hold a codec
    character_category = staticmethod(character_category)

    def __len__(self):
        return self.vocab_size

    def __repr__(self):
        return f'{type(self).__name__}(vocab_size={self.vocab_size})'


DEFAULT_CODEC = CharacterCodec()
