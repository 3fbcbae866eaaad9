"""Mount-relative path parsing for the browse endpoint.

A path resolves to one of four shapes:

    <mount>, <mount>/, <mount>// -> NoSegments
    <mount>/<store>[/]           -> OneSegment(store)
    <mount>/<store>/<key>        -> TwoSegments(store, key)
    anything else                -> Malformed

Keys containing ``/`` cannot be addressed.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True)
class NoSegments:
    pass

@dataclass(frozen=True)
class OneSegment:
    name: str

@dataclass(frozen=True)
class TwoSegments:
    name: str
    key: str

@dataclass(frozen=True)
class Malformed:
    path: str

Parsed = Union[NoSegments, OneSegment, TwoSegments, Malformed]

def normalize_mount(mount: str) -> str:
    mount = "/" + mount.strip("/")
    if mount == "/":
        raise ValueError("mount prefix must name at least one path segment")
    return mount

def parse_path(path: str, mount: str) -> Parsed:
    mount = normalize_mount(mount)
    if not path.startswith(mount):
        return Malformed(path)
    rest = path[len(mount):]
    if rest in ("", "/"):
        return NoSegments()
    if not rest.startswith("/"):
        return Malformed(path)

    segments = rest[1:].split("/")
    # only empty segments, e.g. <mount>//, name no store
    if not any(segments):
        return NoSegments()
    # a trailing slash leaves an empty tail that must not count as a key
    if len(segments) == 2 and segments[1] == "":
        segments = segments[:1]
    if len(segments) > 2 or segments[0] == "":
        return Malformed(path)
    if len(segments) == 1:
        return OneSegment(segments[0])
    return TwoSegments(segments[0], segments[1])
