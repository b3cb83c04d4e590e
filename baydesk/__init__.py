"""baydesk: настольная консоль для контейнеров Docker с группировкой по именам."""

__version__ = "0.3.0"
