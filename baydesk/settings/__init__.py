"""Подсистема настроек baydesk."""
