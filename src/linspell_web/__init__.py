"""Flask front end for the LinSpell engine: JSON lookup API and a one-page UI."""
from __future__ import annotations
from .web import app, main

__all__ = ["app", "main"]
