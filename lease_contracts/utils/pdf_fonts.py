"""Serif font support for ReportLab PDF generation.

Font resolution order:
1. Bundled DejaVu Serif fonts (lease_contracts/fonts/)
2. Windows Times New Roman (C:/Windows/Fonts/)
3. Linux system serif fonts (/usr/share/fonts/)
4. ReportLab's built-in Times family, which covers Portuguese accents
"""

import logging
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

logger = logging.getLogger(__name__)

_fonts_registered = False

_BUNDLED_FONTS_DIR = Path(__file__).resolve().parent.parent / "fonts"

# (registered_name, candidate paths); first existing path wins
_FONT_CANDIDATES = {
    "ContractSerif": [
        _BUNDLED_FONTS_DIR / "DejaVuSerif.ttf",
        Path("C:/Windows/Fonts/times.ttf"),
        Path("/usr/share/fonts/truetype/dejavu/DejaVuSerif.ttf"),
        Path("/usr/share/fonts/dejavu/DejaVuSerif.ttf"),
        Path("/usr/share/fonts/truetype/liberation/LiberationSerif-Regular.ttf"),
    ],
    "ContractSerif-Bold": [
        _BUNDLED_FONTS_DIR / "DejaVuSerif-Bold.ttf",
        Path("C:/Windows/Fonts/timesbd.ttf"),
        Path("/usr/share/fonts/truetype/dejavu/DejaVuSerif-Bold.ttf"),
        Path("/usr/share/fonts/dejavu/DejaVuSerif-Bold.ttf"),
        Path("/usr/share/fonts/truetype/liberation/LiberationSerif-Bold.ttf"),
    ],
}

_registered_names = {"normal": None, "bold": None}


def register_contract_fonts() -> bool:
    """Register TrueType serif fonts with ReportLab, if any are installed."""
    global _fonts_registered

    if _fonts_registered:
        return True

    for style_key, candidates in _FONT_CANDIDATES.items():
        for path in candidates:
            if path.exists():
                try:
                    pdfmetrics.registerFont(TTFont(style_key, str(path)))
                    role = "bold" if "Bold" in style_key else "normal"
                    _registered_names[role] = style_key
                    break
                except Exception as e:
                    logger.warning("Could not register font %s from %s: %s", style_key, path, e)

    normal = _registered_names["normal"]
    bold = _registered_names["bold"]

    if normal:
        pdfmetrics.registerFontFamily(
            normal,
            normal=normal,
            bold=bold or normal,
            italic=normal,
            boldItalic=bold or normal,
        )
        _fonts_registered = True
        return True

    logger.info("No TrueType serif fonts found, using built-in Times")
    return False


def get_font_name(bold: bool = False) -> str:
    """Get the appropriate registered font name."""
    register_contract_fonts()

    normal = _registered_names["normal"]
    if not normal:
        return "Times-Bold" if bold else "Times-Roman"
    if bold:
        return _registered_names["bold"] or normal
    return normal
