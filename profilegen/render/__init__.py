"""README rendering."""

from profilegen.render.layout import CONTENT_WIDTH, pad_or_truncate, truncate
from profilegen.render.sections import render_readme

__all__ = ["CONTENT_WIDTH", "pad_or_truncate", "truncate", "render_readme"]
