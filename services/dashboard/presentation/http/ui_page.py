"""Dashboard page and placeholder image."""

from pathlib import Path

_TEMPLATES_DIR = Path(__file__).with_name("templates")
_TEMPLATE_PATH = _TEMPLATES_DIR / "dashboard_ui.html"
_PLACEHOLDER_PATH = _TEMPLATES_DIR / "placeholder.svg"


def build_ui_html() -> str:
    return _TEMPLATE_PATH.read_text(encoding="utf-8")


def build_placeholder_svg() -> str:
    return _PLACEHOLDER_PATH.read_text(encoding="utf-8")
