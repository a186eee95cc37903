"""FastAPI collaborator that turns matched routes into mediated signals."""

from .routing import MediatedRouter, serialize_request

__all__ = [
    "MediatedRouter",
    "serialize_request",
]
