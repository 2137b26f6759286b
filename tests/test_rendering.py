"""
Tests for set templates and asset requirements.
"""

from bs4 import BeautifulSoup
from markupsafe import Markup

from responsive_images.models import ImageHandle, Rendition
from responsive_images.rendering.requirements import AssetRequirements
from responsive_images.rendering.set_renderer import SetRenderer


def _context():
    return {
        "Title": 'Lake "at dusk"',
        "Sizes": [
            Rendition(image=ImageHandle(url="/small.jpg"), query="(min-width: 200px)"),
            Rendition(image="/large.jpg", query="(min-width: 800px)"),
        ],
        "DefaultImage": ImageHandle(url="/default.jpg"),
    }


def test_render_bundled_template():
    """Test the bundled ResponsiveImageSet template."""
    markup = SetRenderer().render("ResponsiveImageSet", _context())

    assert isinstance(markup, Markup)
    soup = BeautifulSoup(markup, "html.parser")
    assert [s["srcset"] for s in soup.find_all("source")] == ["/small.jpg", "/large.jpg"]
    assert soup.find("img")["src"] == "/default.jpg"
    assert soup.find("img")["alt"] == 'Lake "at dusk"'


def test_render_escapes_values():
    """Test that attribute values are escaped."""
    markup = SetRenderer().render("ResponsiveImageSet", _context())
    assert "&#34;at dusk&#34;" in markup


def test_theme_template_overrides_bundled(tmp_path):
    """Test that a theme directory takes precedence."""
    (tmp_path / "ResponsiveImageSet.html").write_text(
        '<figure data-count="{{ Sizes|length }}"><img src="{{ DefaultImage }}"></figure>',
        encoding="utf-8",
    )

    markup = SetRenderer(theme_dir=tmp_path).render("ResponsiveImageSet", _context())

    soup = BeautifulSoup(markup, "html.parser")
    assert soup.find("figure")["data-count"] == "2"
    assert soup.find("picture") is None


def test_requirements_deduplicate():
    """Test that scripts are declared once, in order."""
    requirements = AssetRequirements()
    requirements.javascript("js/a.js")
    requirements.javascript("js/b.js")
    requirements.javascript("js/a.js")

    assert requirements.scripts == ["js/a.js", "js/b.js"]


def test_requirements_render_scripts():
    """Test script tag output and URL prefixing."""
    requirements = AssetRequirements(base_url="/static")
    requirements.javascript("js/a.js")
    requirements.javascript("https://cdn.example.com/b.js")

    soup = BeautifulSoup(requirements.render_scripts(), "html.parser")

    assert [tag["src"] for tag in soup.find_all("script")] == [
        "/static/js/a.js",
        "https://cdn.example.com/b.js",
    ]

    requirements.clear()
    assert requirements.render_scripts() == ""
