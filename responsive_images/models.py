"""
Data models for responsive image set configuration and rendering.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


DEFAULT_ARGUMENTS = [800, 600]
DEFAULT_METHOD = "SetWidth"
DEFAULT_POLYFILL_PATH = "responsive_images/javascript/picturefill/picturefill.min.js"
DEFAULT_TEMPLATE = "ResponsiveImageSet"


class SetConfig(BaseModel):
    """Configuration of a single responsive image set."""
    method: Optional[str] = None
    # Left untyped so malformed breakpoints surface as set errors at render time
    arguments: Any = None
    default_arguments: Optional[List[Any]] = None

    class Config:
        frozen = True


class ResponsiveImagesConfig(BaseModel):
    """Site-wide configuration for responsive image sets."""
    sets: Dict[str, SetConfig] = Field(default_factory=dict)
    default_arguments: List[Any] = Field(default_factory=lambda: list(DEFAULT_ARGUMENTS))
    default_method: str = DEFAULT_METHOD
    polyfill_path: str = DEFAULT_POLYFILL_PATH
    template: str = DEFAULT_TEMPLATE

    class Config:
        frozen = True


class ImageHandle(BaseModel):
    """A generated image, as returned by an image host."""
    url: str
    width: Optional[int] = None
    height: Optional[int] = None

    def __str__(self) -> str:
        return self.url


class CropData(BaseModel):
    """Crop parameters computed from an image's focal point."""
    crop_axis: str
    crop_offset: int


class Rendition(BaseModel):
    """One generated image and the media query that selects it."""
    image: Any
    query: str

    class Config:
        arbitrary_types_allowed = True


class RenderPayload(BaseModel):
    """Renditions for one responsive set, ready for the template."""
    set_name: str
    sizes: List[Rendition] = Field(default_factory=list)
    default_image: Any = None

    class Config:
        arbitrary_types_allowed = True

    def to_template_context(self) -> Dict[str, Any]:
        """Template variables under the names the set template expects."""
        return {
            "Sizes": self.sizes,
            "DefaultImage": self.default_image,
        }
