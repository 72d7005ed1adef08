# seotag — Ports (Protocol Interfaces)
# Abstract interfaces for the resolver's collaborators; no implementations here

from seotag.core.ports.dates import DatePort
from seotag.core.ports.lookups import AuthorLookupPort, ImageLookupPort
from seotag.core.ports.text import TextFormatterPort, TruncatorPort
from seotag.core.ports.urls import UrlPort

__all__ = [
    "AuthorLookupPort",
    "DatePort",
    "ImageLookupPort",
    "TextFormatterPort",
    "TruncatorPort",
    "UrlPort",
]
