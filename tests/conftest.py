"""
Shared fixtures for responsive image set tests.
"""

import pytest

from responsive_images.images.host import ImageHost
from responsive_images.models import ImageHandle, ResponsiveImagesConfig, SetConfig
from responsive_images.utils.render_logger import LogLevel, get_logger


class FakeImageHost(ImageHost):
    """Image host that records calls and returns predictable handles."""

    title = "Mountain lake"

    def __init__(self, filename: str = "lake.jpg"):
        self.filename = filename
        self.calls = []

    def format_image(self, method_name, *args):
        self.calls.append((method_name, *args))
        suffix = "-".join(str(arg) for arg in args)
        return ImageHandle(
            url=f"/assets/_resampled/{method_name}{suffix}-{self.filename}",
            width=args[0] if args and isinstance(args[0], int) else None,
            height=args[1] if len(args) > 1 and isinstance(args[1], int) else None,
        )


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep the render logger silent unless a test turns it on."""
    logger = get_logger()
    previous_level, previous_file = logger.level, logger.log_file
    logger.level = LogLevel.NONE
    logger.log_file = None
    yield logger
    logger.level, logger.log_file = previous_level, previous_file


@pytest.fixture
def image_host():
    return FakeImageHost()


@pytest.fixture
def cropped_set():
    return SetConfig(
        method="CroppedImage",
        arguments={
            "(min-width: 200px)": [200, 100],
            "(min-width: 800px)": [200, 400],
        },
        default_arguments=[200, 400],
    )


@pytest.fixture
def site_config(cropped_set):
    return ResponsiveImagesConfig(
        sets={
            "MyResponsiveImageSet": cropped_set,
            "WidthOnly": SetConfig(
                arguments={
                    "(min-width: 1200px)": [1200],
                    "(min-width: 600px)": [600],
                },
            ),
        }
    )
