"""
i18n module - Static translation catalog and template rendering.
"""

from common.i18n.service import TranslationCatalog, render

__all__ = ["TranslationCatalog", "render"]
