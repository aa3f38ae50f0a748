"""Pixels, image views, transformer chains, reader and writer interfaces, and BMP input and output."""

__version__ = "1.0.0"
__all__ = ["pixel", "view", "transformers", "interfaces", "bmp", "series"]