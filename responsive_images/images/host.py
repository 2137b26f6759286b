"""
Image host interface consumed by responsive image sets.

A host wraps a single stored image and knows how to produce resized
variants of it. The storage and resampling backend lives outside this
package; responsive sets only call into it through this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, FrozenSet


# Crop method that takes the image's focal point into account
FOCUS_CROP_METHOD = "CroppedFocusedImage"


class ImageHost(ABC):
    """
    Abstract interface for an image that can be formatted into renditions.

    Implementations return an image handle from format_image(), usually an
    ImageHandle with a URL the template can link to.
    """

    formatting_methods: FrozenSet[str] = frozenset({
        "SetWidth",
        "SetHeight",
        "SetSize",
        "SetRatioSize",
        "CroppedImage",
        "PaddedImage",
        FOCUS_CROP_METHOD,
    })

    title: str = ""

    @abstractmethod
    def format_image(self, method_name: str, *args: Any) -> Any:
        """
        Produce a formatted variant of the image.

        Args:
            method_name: Formatting method, e.g. "CroppedImage"
            *args: Method arguments, typically width and height

        Returns:
            Image handle for the generated variant
        """

    def has_method(self, name: Any) -> bool:
        """Check whether name is a formatting method (case-insensitive)."""
        if not isinstance(name, str):
            return False
        lowered = name.lower()
        return any(method.lower() == lowered for method in self.formatting_methods)
