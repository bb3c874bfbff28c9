from __future__ import annotations

from .corpus import generate_document, generate_texts, measure

__all__ = ["generate_document", "generate_texts", "measure"]
