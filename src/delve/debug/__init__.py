from .ascii_map import render_ascii

__all__ = ["render_ascii"]
