"""Raw label text segmentation."""

from .segmenter import format_content, segment

__all__ = ["format_content", "segment"]
