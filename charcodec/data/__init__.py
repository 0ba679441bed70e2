"""
Codec tables and torch data utilities
"""

from .tokenizer import (
    BOS_ID,
    BOS_TOKEN,
    DEFAULT_CODEC,
    EOS_ID,
    EOS_TOKEN,
    SPECIAL_TOKENS,
    VOCAB_SIZE,
    CharacterCodec,
    character_category,
)
from .dataset import EncodedTextDataset, decode_tensor, encode_tensor

__all__ = [
    "BOS_ID",
    "BOS_TOKEN",
    "DEFAULT_CODEC",
    "EOS_ID",
    "EOS_TOKEN",
    "SPECIAL_TOKENS",
    "VOCAB_SIZE",
    "CharacterCodec",
    "character_category",
    "EncodedTextDataset",
    "decode_tensor",
    "encode_tensor",
]
