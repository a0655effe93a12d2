from .url import normalize_url

__all__ = ["normalize_url"]
