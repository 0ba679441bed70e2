"""
Torch helpers for feeding encoded text to models
"""

import logging
import torch
from torch.utils.data import Dataset
from typing import List, Optional
from .tokenizer import CharacterCodec, DEFAULT_CODEC

logger = logging.getLogger(__name__)


def encode_tensor(text: str, codec: Optional[CharacterCodec] = None,
                  wrap_special: bool = True) -> torch.Tensor:
    """Convert text to a 1-D tensor of token ids"""
    codec = codec or DEFAULT_CODEC
    return torch.tensor(codec.encode(text, wrap_special), dtype=torch.long)


def decode_tensor(ids: torch.Tensor, codec: Optional[CharacterCodec] = None) -> str:
    """Convert a tensor of token ids back to text"""
    codec = codec or DEFAULT_CODEC
    return codec.decode(ids.reshape(-1).tolist())


class EncodedTextDataset(Dataset):
    """Next-character prediction samples cut from encoded text"""

    def __init__(self, texts: List[str], codec: Optional[CharacterCodec] = None,
                 context_window: int = 32, stride: int = 16,
                 wrap_special: bool = True):
        if context_window < 1:
            raise ValueError(f"context_window must be positive, got {context_window}")
        if stride < 1:
            raise ValueError(f"stride must be positive, got {stride}")

        self.codec = codec or DEFAULT_CODEC
        self.context_window = context_window
        self.stride = stride
        self.wrap_special = wrap_special
        self.samples = []

        for text in texts:
            self._process_text(text)

        logger.debug("Built %d samples from %d texts", len(self.samples), len(texts))

    def _process_text(self, text: str):
        """Cut one encoded text into overlapping windows"""
        ids = self.codec.encode(text, self.wrap_special)
        span = self.context_window + 1

        # Each window holds the inputs plus one extra id for the shifted target
        for i in range(0, len(ids) - span + 1, self.stride):
            window = ids[i:i + span]
            self.samples.append((window[:-1], window[1:]))

    def __len__(self):
        return len(self.samples)

    def __getitem__(self, idx):
        input_ids, target_ids = self.samples[idx]
        return (torch.tensor(input_ids, dtype=torch.long),
                torch.tensor(target_ids, dtype=torch.long))
