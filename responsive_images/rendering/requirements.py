"""
Client-side asset requirements collected while rendering a page.
"""

from typing import List

from markupsafe import Markup, escape


class AssetRequirements:
    """Collects script dependencies for one page render, each declared once."""

    def __init__(self, base_url: str = "/"):
        """
        Initialize the requirements collector.

        Args:
            base_url: URL prefix for relative asset paths.
        """
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._scripts: List[str] = []

    def javascript(self, path: str):
        """
        Declare a script dependency. Repeated declarations are ignored.

        Args:
            path: Asset path, relative to base_url unless absolute.
        """
        if path not in self._scripts:
            self._scripts.append(path)

    @property
    def scripts(self) -> List[str]:
        """Declared script paths in declaration order."""
        return list(self._scripts)

    def script_url(self, path: str) -> str:
        if path.startswith(("/", "http://", "https://")):
            return path
        return self.base_url + path

    def render_scripts(self) -> Markup:
        """Render a <script> tag for every declared script."""
        tags = [
            f'<script src="{escape(self.script_url(path))}"></script>'
            for path in self._scripts
        ]
        return Markup("\n".join(tags))

    def clear(self):
        """Forget all declared scripts."""
        self._scripts.clear()
