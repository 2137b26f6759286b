"""
Responsive image sets: configuration-driven <picture> renditions for images.
"""

from responsive_images.sets.dispatch import ResponsiveImage, ResponsiveSetCall
from responsive_images.sets.resolver import (
    InvalidMediaQuery,
    MissingArguments,
    MissingBreakpointArguments,
    ResponsiveSetError,
    ResponsiveSetResolver,
)

__all__ = [
    "ResponsiveImage",
    "ResponsiveSetCall",
    "ResponsiveSetResolver",
    "ResponsiveSetError",
    "MissingArguments",
    "InvalidMediaQuery",
    "MissingBreakpointArguments",
]
