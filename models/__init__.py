"""Data models for codec parameters and results."""

from .components import Components
from .blurhash_params import BlurHashParams
from .blurhash_result import BlurHashResult

__all__ = ['Components', 'BlurHashParams', 'BlurHashResult']
