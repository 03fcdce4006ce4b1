"""Image codecs keyed by format tag."""

from .base import ImageCodec
from .registry import CodecRegistry, create_default_registry, decode, encode

__all__ = ["ImageCodec", "CodecRegistry", "create_default_registry", "decode", "encode"]
