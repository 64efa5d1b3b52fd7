"""
Color catalogues for palettes and banner backgrounds.

A palette drives accent colors in banners and exported resumes; a banner
color is the background the banner is drawn on.
"""
from django.db import models


class Palette(models.TextChoices):
    FIRE_RED = 'fireRed', 'Fire Red'
    SUNSET_ORANGE = 'sunsetOrange', 'Sunset Orange'
    GOLDEN_YELLOW = 'goldenYellow', 'Golden Yellow'
    DARK_GREEN = 'darkGreen', 'Dark Green'
    TEAL = 'teal', 'Teal'
    EMERALD = 'emerald', 'Emerald'
    DEEP_BLUE = 'deepBlue', 'Deep Blue'
    CYAN = 'cyan', 'Cyan'
    INDIGO = 'indigo', 'Indigo'
    VIBRANT_PURPLE = 'vibrantPurple', 'Vibrant Purple'
    DEEP_PURPLE = 'deepPurple', 'Deep Purple'
    HOT_PINK = 'hotPink', 'Hot Pink'


class BannerColor(models.TextChoices):
    PURE_WHITE = 'pureWhite', 'Pure White'
    SNOW_WHITE = 'snowWhite', 'Snow White'
    LIGHT_ASH = 'lightAsh', 'Light Ash'
    GRAPHITE = 'graphite', 'Graphite'
    MIDNIGHT_SLATE = 'midnightSlate', 'Midnight Slate'
    ONYX = 'onyx', 'Onyx'


DEFAULT_PALETTE = Palette.DARK_GREEN
DEFAULT_BANNER_COLOR = BannerColor.MIDNIGHT_SLATE


# accent: strings and highlights, key: object keys, secondary: keywords
PALETTE_COLORS = {
    Palette.FIRE_RED: {'accent': '#ef4444', 'key': '#fef2f2', 'secondary': '#f87171'},
    Palette.SUNSET_ORANGE: {'accent': '#f97316', 'key': '#fff7ed', 'secondary': '#fdba74'},
    Palette.GOLDEN_YELLOW: {'accent': '#eab308', 'key': '#fefce8', 'secondary': '#facc15'},
    Palette.DARK_GREEN: {'accent': '#22c55e', 'key': '#f7fafc', 'secondary': '#4ade80'},
    Palette.TEAL: {'accent': '#14b8a6', 'key': '#f0fdfa', 'secondary': '#2dd4bf'},
    Palette.EMERALD: {'accent': '#10b981', 'key': '#ecfdf5', 'secondary': '#34d399'},
    Palette.DEEP_BLUE: {'accent': '#3b82f6', 'key': '#f8fafc', 'secondary': '#60a5fa'},
    Palette.CYAN: {'accent': '#06b6d4', 'key': '#ecfeff', 'secondary': '#22d3ee'},
    Palette.INDIGO: {'accent': '#6366f1', 'key': '#eef2ff', 'secondary': '#818cf8'},
    Palette.VIBRANT_PURPLE: {'accent': '#a855f7', 'key': '#faf5ff', 'secondary': '#c084fc'},
    Palette.DEEP_PURPLE: {'accent': '#8b5cf6', 'key': '#f5f3ff', 'secondary': '#a78bfa'},
    Palette.HOT_PINK: {'accent': '#ec4899', 'key': '#fdf2f8', 'secondary': '#f472b6'},
}

BANNER_COLORS = {
    BannerColor.PURE_WHITE: {'bg': '#ffffff', 'text': '#000000'},
    BannerColor.SNOW_WHITE: {'bg': '#f8fafc', 'text': '#1a1a1a'},
    BannerColor.LIGHT_ASH: {'bg': '#e5e7eb', 'text': '#23272f'},
    BannerColor.GRAPHITE: {'bg': '#23272f', 'text': '#f3f4f6'},
    BannerColor.MIDNIGHT_SLATE: {'bg': '#181e29', 'text': '#f8fafc'},
    BannerColor.ONYX: {'bg': '#101014', 'text': '#f8fafc'},
}


def resolve_palette(name) -> str:
    """Return a known palette name, falling back to the default."""
    if name in Palette.values:
        return name
    return DEFAULT_PALETTE.value


def resolve_banner_color(name) -> str:
    """Return a known banner color name, falling back to the default."""
    if name in BannerColor.values:
        return name
    return DEFAULT_BANNER_COLOR.value


def palette_colors(name) -> dict:
    return PALETTE_COLORS[Palette(resolve_palette(name))]


def banner_colors(name) -> dict:
    return BANNER_COLORS[BannerColor(resolve_banner_color(name))]
