from .core import DEFAULT_LANG, LANGUAGES, load_lang, t

__all__ = ["DEFAULT_LANG", "LANGUAGES", "load_lang", "t"]
