"""Line content classifiers for the comment lexer.

Each classifier is a mixin that provides classification logic for one kind
of line content. Classifiers never move the lexer position.
"""

from kdocfmt.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from kdocfmt.lexer.classifiers.inline import (
    InlineClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "InlineClassifierMixin",
]
