"""The rich console that replies, listings and errors are printed on."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Return the console shared by every command module."""
    return Console(highlight=highlight)


def apply_color_setting(enabled: bool) -> None:
    """Honour the ``output.color`` setting on the shared console."""
    get_console().no_color = not enabled
