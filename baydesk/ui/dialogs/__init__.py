"""Пакет диалоговых окон."""

from .text_dialog import TextDialog

__all__ = ["TextDialog"]
