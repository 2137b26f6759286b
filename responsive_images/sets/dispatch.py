"""
Template-facing access to responsive image sets.

Wrapping an image in ResponsiveImage lets templates use configured set
names as if they were attributes of the image::

    {{ image.MyResponsiveImageSet }}
    {{ image.MyResponsiveImageSet(400, 300) }}
"""

from typing import Any, Callable, List, Optional

from markupsafe import Markup

from responsive_images.images.focus_point import FocusPointCropper
from responsive_images.images.host import ImageHost
from responsive_images.models import ResponsiveImagesConfig
from responsive_images.rendering.requirements import AssetRequirements
from responsive_images.rendering.set_renderer import SetRenderer
from responsive_images.sets.resolver import ResponsiveSetResolver


class ResponsiveSetCall:
    """A set looked up on an image, rendered when printed or called."""

    def __init__(self, set_name: str, handler: Callable[..., Markup]):
        self.set_name = set_name
        self.handler = handler

    def __call__(self, *args: Any) -> Markup:
        return self.handler(self.set_name, *args)

    def __html__(self) -> str:
        return str(self.handler(self.set_name))

    def __str__(self) -> str:
        return self.__html__()

    def __repr__(self) -> str:
        return f"<ResponsiveSetCall {self.set_name}>"


class ResponsiveImage:
    """Image wrapper that exposes configured responsive sets as attributes."""

    def __init__(
        self,
        image: ImageHost,
        config: Optional[ResponsiveImagesConfig] = None,
        renderer: Optional[SetRenderer] = None,
        requirements: Optional[AssetRequirements] = None,
        cropper: Optional[FocusPointCropper] = None,
    ):
        """
        Initialize the wrapper.

        Args:
            image: Host image to generate renditions from.
            config: Site configuration with the set definitions.
            renderer: Template renderer for the set markup.
            requirements: Asset collector for the current page.
            cropper: Optional focal point cropper.
        """
        self.image = image
        self.resolver = ResponsiveSetResolver(
            image,
            config=config,
            renderer=renderer,
            requirements=requirements,
            cropper=cropper,
        )

    def __getattr__(self, name: str):
        """Resolve set names first, then delegate to the wrapped image."""
        if name.startswith("_") or name in ("image", "resolver"):
            raise AttributeError(name)

        handler = self.resolver.get_handler(name)
        if handler is not None:
            return ResponsiveSetCall(name, handler)
        return getattr(self.image, name)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self.all_method_names()))

    def all_method_names(self) -> List[str]:
        """Names that can be called on this image as responsive sets."""
        return self.resolver.list_available_sets()
