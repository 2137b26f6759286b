"""
Focal point crop calculation.

Focus coordinates run from -1 to 1 on each axis, with (0, 0) at the image
centre, positive x to the right and positive y towards the top.
"""

from typing import Union

from responsive_images.models import CropData


Number = Union[int, float]


class FocusPointCropper:
    """Computes crop offsets that keep an image's focal point in frame."""

    def __init__(
        self,
        image_width: int,
        image_height: int,
        focus_x: float = 0.0,
        focus_y: float = 0.0
    ):
        """
        Initialize the cropper.

        Args:
            image_width: Width of the source image in pixels.
            image_height: Height of the source image in pixels.
            focus_x: Horizontal focus coordinate (-1 left, 1 right).
            focus_y: Vertical focus coordinate (-1 bottom, 1 top).
        """
        if image_width <= 0 or image_height <= 0:
            raise ValueError(f"Invalid image size: {image_width}x{image_height}")
        if not -1 <= focus_x <= 1 or not -1 <= focus_y <= 1:
            raise ValueError(f"Focus point out of range: ({focus_x}, {focus_y})")

        self.image_width = image_width
        self.image_height = image_height
        self.focus_x = focus_x
        self.focus_y = focus_y

    @staticmethod
    def _offset(focus_px: float, target: Number, scaled: float) -> int:
        """Offset that centres target on focus_px without leaving the image."""
        offset = focus_px - target / 2
        offset = max(0.0, min(offset, scaled - target))
        return int(round(offset))

    def calculate_crop(self, width: Number, height: Number) -> CropData:
        """
        Calculate the crop axis and offset for a target size.

        The image is scaled so it covers width x height, then cropped along
        whichever axis overflows.

        Args:
            width: Target width in pixels.
            height: Target height in pixels.

        Returns:
            CropData with the axis to crop along and the offset in pixels.
        """
        width = float(width)
        height = float(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid crop size: {width}x{height}")

        width_ratio = self.image_width / width
        height_ratio = self.image_height / height

        if width_ratio > height_ratio:
            scaled_width = self.image_width / height_ratio
            focus_px = (self.focus_x + 1) / 2 * scaled_width
            return CropData(
                crop_axis="x",
                crop_offset=self._offset(focus_px, width, scaled_width)
            )

        scaled_height = self.image_height / width_ratio
        focus_px = (1 - self.focus_y) / 2 * scaled_height
        return CropData(
            crop_axis="y",
            crop_offset=self._offset(focus_px, height, scaled_height)
        )
