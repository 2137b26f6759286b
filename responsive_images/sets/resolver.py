"""
Resolution and building of responsive image sets.

Sets are defined in configuration, e.g.::

    sets:
      MyResponsiveImageSet:
        method: CroppedImage
        arguments:
          "(min-width: 200px)": [200, 100]
          "(min-width: 800px)": [200, 400]
          "(min-width: 1200px) and (min-device-pixel-ratio: 2.0)": [800, 400]
        default_arguments: [200, 400]

Each breakpoint becomes one rendition, in the order it is declared, plus a
default rendition for browsers where no media query matches.
"""

import copy
import re
import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Optional, Sequence

from markupsafe import Markup

from responsive_images.images.focus_point import FocusPointCropper
from responsive_images.images.host import FOCUS_CROP_METHOD, ImageHost
from responsive_images.models import RenderPayload, Rendition, ResponsiveImagesConfig, SetConfig
from responsive_images.rendering.requirements import AssetRequirements
from responsive_images.rendering.set_renderer import SetRenderer
from responsive_images.utils.render_logger import LoggedImageHost, get_logger


# Matches what counts as a number in config keys, including " 2 " and "1e3"
NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


class ResponsiveSetError(ValueError):
    """A responsive set's configuration cannot be rendered."""

    def __init__(self, set_name: str, message: str):
        super().__init__(message)
        self.set_name = set_name


class MissingArguments(ResponsiveSetError):
    """Set has no breakpoint arguments."""

    def __init__(self, set_name: str):
        super().__init__(
            set_name,
            f"Responsive set {set_name} does not have any arguments defined in its config."
        )


class InvalidMediaQuery(ResponsiveSetError):
    """Breakpoint key is empty or numeric instead of a media query."""

    def __init__(self, set_name: str, query: Any):
        super().__init__(
            set_name,
            f"Responsive set {set_name} has an empty media query ({query!r}). "
            f"Please check your config format"
        )
        self.query = query


class MissingBreakpointArguments(ResponsiveSetError):
    """Breakpoint has no arguments."""

    def __init__(self, set_name: str, query: str):
        super().__init__(
            set_name,
            f"Responsive set {set_name} doesn't have any arguments provided for the query: {query}"
        )
        self.query = query


def is_numeric(value: Any) -> bool:
    """Check whether a config key is a number or a numeric string."""
    if isinstance(value, (bool, int, float)):
        return True
    if isinstance(value, str):
        return NUMERIC_PATTERN.match(value) is not None
    return False


class ResponsiveSetResolver:
    """Resolves responsive set names and builds their renditions for one image."""

    def __init__(
        self,
        image: ImageHost,
        config: Optional[ResponsiveImagesConfig] = None,
        renderer: Optional[SetRenderer] = None,
        requirements: Optional[AssetRequirements] = None,
        cropper: Optional[FocusPointCropper] = None,
    ):
        """
        Initialize the resolver.

        Args:
            image: Host image that renditions are generated from.
            config: Site configuration. Defaults to an empty configuration.
            renderer: Template renderer. Defaults to the bundled templates.
            requirements: Asset collector for the current page.
            cropper: Optional focal point cropper for CroppedFocusedImage.
        """
        self.image = image
        self.config = config or ResponsiveImagesConfig()
        self.renderer = renderer or SetRenderer()
        self.requirements = requirements if requirements is not None else AssetRequirements()
        self.cropper = cropper
        self.logger = get_logger()

        self._config_sets = MappingProxyType(copy.deepcopy(dict(self.config.sets)))
        self._sets_by_name = MappingProxyType({
            name.lower(): set_config for name, set_config in self._config_sets.items()
        })
        # Handlers take the set name as called, so payloads and errors keep its case
        self._handlers: Dict[str, Callable[..., Optional[Markup]]] = {
            name: self.render_responsive_set for name in self._sets_by_name
        }

    def get_config_for_set(self, set_name: str) -> Optional[SetConfig]:
        """
        Get the configuration of a set, ignoring case.

        Args:
            set_name: Set name as called from a template.

        Returns:
            SetConfig, or None if no such set is configured.
        """
        return self._sets_by_name.get(set_name.lower())

    def list_available_sets(self) -> List[str]:
        """Lower-cased names of all configured sets."""
        return list(self._sets_by_name.keys())

    def get_handler(self, set_name: str) -> Optional[Callable[..., Optional[Markup]]]:
        """
        Get the render function registered for a set name, ignoring case.

        The handler is called as handler(set_name, *args) with the name as
        the template used it.
        """
        return self._handlers.get(set_name.lower())

    def _validate(self, set_config: SetConfig, set_name: str):
        arguments = set_config.arguments
        if not isinstance(arguments, Mapping) or not arguments:
            raise MissingArguments(set_name)

        for query, args in arguments.items():
            if not query or not isinstance(query, str) or is_numeric(query):
                raise InvalidMediaQuery(set_name, query)
            if not isinstance(args, (list, tuple)) or not args:
                raise MissingBreakpointArguments(set_name, query)

    def _uses_focus_crop(self, method_name: str) -> bool:
        return self.cropper is not None and method_name == FOCUS_CROP_METHOD

    def _with_crop(self, args: List[Any], width: Any, height: Any) -> List[Any]:
        crop = self.cropper.calculate_crop(width, height)
        return args + [crop.crop_axis, crop.crop_offset]

    def _resolve_default_args(
        self,
        set_config: SetConfig,
        override_default_args: Optional[Sequence[Any]],
    ) -> List[Any]:
        if override_default_args:
            return list(override_default_args)
        if set_config.default_arguments is not None:
            return list(set_config.default_arguments)
        return list(self.config.default_arguments)

    def create_responsive_set(
        self,
        set_config: SetConfig,
        override_default_args: Optional[Sequence[Any]],
        set_name: str,
    ) -> RenderPayload:
        """
        Generate the renditions for a responsive set.

        Args:
            set_config: Configuration of the set.
            override_default_args: Arguments from the template call. When
                non-empty, they replace the default rendition's arguments.
            set_name: Set name, used in error messages.

        Returns:
            RenderPayload with one rendition per breakpoint and a default image.

        Raises:
            MissingArguments: If the set has no breakpoints.
            InvalidMediaQuery: If a breakpoint key is empty or numeric.
            MissingBreakpointArguments: If a breakpoint has no arguments.
        """
        try:
            self._validate(set_config, set_name)
            return self._build_payload(set_config, override_default_args, set_name)
        except Exception as e:
            self.logger.log_error(set_name, e)
            raise

    def _build_payload(
        self,
        set_config: SetConfig,
        override_default_args: Optional[Sequence[Any]],
        set_name: str,
    ) -> RenderPayload:
        method_name = set_config.method or self.config.default_method
        default_args = self._resolve_default_args(set_config, override_default_args)

        start_time = time.time()
        invocation_id = self.logger.log_set_request(set_name, method_name, override_default_args)
        image = LoggedImageHost(self.image, set_name, invocation_id)

        self.requirements.javascript(self.config.polyfill_path)

        sizes = []
        for query, args in set_config.arguments.items():
            args = list(args)
            if self._uses_focus_crop(method_name) and len(args) >= 2:
                args = self._with_crop(args, args[0], args[1])

            rendition = image.format_image(method_name, *args, query=query)
            sizes.append(Rendition(image=rendition, query=query))

        # The first default argument may itself be a method such as "CroppedImage"
        if not default_args or not self.image.has_method(default_args[0]):
            default_args.insert(0, method_name)

        if self._uses_focus_crop(method_name) and len(default_args) >= 3:
            default_args = self._with_crop(default_args, default_args[1], default_args[2])

        default_image = image.format_image(*default_args, query=None)

        self.logger.log_set_rendered(invocation_id, set_name, len(sizes), start_time, time.time())

        return RenderPayload(set_name=set_name, sizes=sizes, default_image=default_image)

    def render_responsive_set(self, set_name: str, *args: Any) -> Optional[Markup]:
        """
        Build a set and render it with the set template.

        Args:
            set_name: Set name, in any case.
            *args: Optional override arguments for the default rendition.

        Returns:
            Rendered markup, or None if no set has that name.
        """
        set_config = self.get_config_for_set(set_name)
        if set_config is None:
            return None

        payload = self.create_responsive_set(set_config, list(args), set_name)
        context = {"Title": getattr(self.image, "title", "") or ""}
        context.update(payload.to_template_context())
        return self.renderer.render(self.config.template, context)
