"""Comment rendering for BundleKit."""

from bundlepack.comment.body import COMMENT_MARKER, identifier_comment, render_comment_body

__all__ = [
    "COMMENT_MARKER",
    "identifier_comment",
    "render_comment_body",
]
