"""
charcodec: character-level text codec with a fixed 74-token vocabulary
"""

__version__ = "0.1.0"

from .data import (
    BOS_ID,
    BOS_TOKEN,
    DEFAULT_CODEC,
    EOS_ID,
    EOS_TOKEN,
    VOCAB_SIZE,
    CharacterCodec,
    character_category,
)
from .core import TokenInfo, VocabularyBrowser, parse_id_list, token_breakdown

__all__ = [
    "BOS_ID",
    "BOS_TOKEN",
    "DEFAULT_CODEC",
    "EOS_ID",
    "EOS_TOKEN",
    "VOCAB_SIZE",
    "CharacterCodec",
    "character_category",
    "TokenInfo",
    "VocabularyBrowser",
    "parse_id_list",
    "token_breakdown",
]
