"""HTML fragments for the listing pages."""
from __future__ import annotations
import html
from typing import Iterable
from urllib.parse import quote

def link(href: str, text: str) -> str:
    return f'<p><a href="{html.escape(href)}">{html.escape(text)}</a></p>'

def store_list(mount: str, names: Iterable[str]) -> str:
    return "".join("\n" + link(f"{mount}/{quote(n, safe='')}", n) for n in names)

def key_list(mount: str, name: str, keys: Iterable[bytes]) -> str:
    base = f"{mount}/{quote(name, safe='')}"
    return "".join(
        "\n" + link(f"{base}/{quote(k, safe='')}", k.decode("utf-8", errors="replace"))
        for k in keys
    )
