"""Bilingual sentence search over text files using chained hash indexes."""

__version__ = "5.0.0"
__all__ = ["chinese", "cli", "english", "index"]