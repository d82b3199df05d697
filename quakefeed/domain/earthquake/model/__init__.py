"""Earthquake domain model."""

from quakefeed.domain.earthquake.model.value import Earthquake

__all__ = ["Earthquake"]
