"""
Tests for template access to responsive sets.
"""

import pytest
from bs4 import BeautifulSoup
from jinja2 import Environment

from responsive_images.models import ResponsiveImagesConfig, SetConfig
from responsive_images.rendering.requirements import AssetRequirements
from responsive_images.sets.dispatch import ResponsiveImage, ResponsiveSetCall
from responsive_images.sets.resolver import MissingArguments


@pytest.fixture
def requirements():
    return AssetRequirements()


@pytest.fixture
def image(image_host, site_config, requirements):
    return ResponsiveImage(image_host, site_config, requirements=requirements)


def test_set_attribute_lookup_ignores_case(image):
    """Test that set names resolve as attributes in any case."""
    assert isinstance(image.MyResponsiveImageSet, ResponsiveSetCall)
    assert isinstance(image.myresponsiveimageset, ResponsiveSetCall)


def test_unknown_attribute_falls_through_to_image(image, image_host):
    """Test that non-set attributes come from the wrapped image."""
    assert image.filename == "lake.jpg"
    assert image.title == "Mountain lake"

    with pytest.raises(AttributeError):
        image.NoSuchSet


def test_all_method_names(image):
    """Test the advertised set names."""
    assert image.all_method_names() == ["myresponsiveimageset", "widthonly"]
    assert "widthonly" in dir(image)


def test_printing_a_set_renders_it(image, image_host):
    """Test that a set renders with its configured defaults when printed."""
    soup = BeautifulSoup(str(image.MyResponsiveImageSet), "html.parser")

    sources = soup.find_all("source")
    assert [source["media"] for source in sources] == ["(min-width: 200px)", "(min-width: 800px)"]
    assert sources[0]["srcset"] == "/assets/_resampled/CroppedImage200-100-lake.jpg"

    img = soup.find("img")
    assert img["src"] == "/assets/_resampled/CroppedImage200-400-lake.jpg"
    assert img["alt"] == "Mountain lake"


def test_calling_a_set_overrides_default(image, image_host):
    """Test that call arguments change only the default image."""
    soup = BeautifulSoup(image.MyResponsiveImageSet(640, 480), "html.parser")

    assert soup.find("img")["src"] == "/assets/_resampled/CroppedImage640-480-lake.jpg"
    assert len(soup.find_all("source")) == 2


def test_jinja_template_usage(image, requirements):
    """Test set rendering from inside a page template."""
    env = Environment(autoescape=True)
    template = env.from_string(
        "<div>{{ image.MyResponsiveImageSet }}</div>"
        "<div>{{ image.widthonly(320) }}</div>"
        "{{ requirements.render_scripts() }}"
    )

    html = template.render(image=image, requirements=requirements)
    soup = BeautifulSoup(html, "html.parser")

    pictures = soup.find_all("picture")
    assert len(pictures) == 2
    assert pictures[1].find("img")["src"] == "/assets/_resampled/SetWidth320-lake.jpg"
    assert [source["media"] for source in pictures[1].find_all("source")] == [
        "(min-width: 1200px)",
        "(min-width: 600px)",
    ]

    scripts = soup.find_all("script")
    assert len(scripts) == 1
    assert scripts[0]["src"].endswith("picturefill/picturefill.min.js")


def test_set_name_keeps_template_case(image_host):
    """Test that errors report the set name as the template wrote it."""
    config = ResponsiveImagesConfig(sets={"BROKENSET": SetConfig(arguments={})})
    image = ResponsiveImage(image_host, config)

    with pytest.raises(MissingArguments) as exc_info:
        image.BrokenSet(400, 300)

    assert exc_info.value.set_name == "BrokenSet"
    assert "Responsive set BrokenSet " in str(exc_info.value)


def test_payload_keeps_template_case(image, monkeypatch):
    """Test that the payload is built under the called set name."""
    resolver = image.resolver
    built = []
    create = resolver.create_responsive_set

    def recording_create(set_config, override_default_args, set_name):
        payload = create(set_config, override_default_args, set_name)
        built.append(payload)
        return payload

    monkeypatch.setattr(resolver, "create_responsive_set", recording_create)

    str(image.MyResponsiveImageSet)

    assert built[0].set_name == "MyResponsiveImageSet"
