"""Hierarchical listings over a flat key namespace."""

from .builder import ListingBuilder, build_listing
from .models import DirAggregate, Listing

__all__ = ["DirAggregate", "Listing", "ListingBuilder", "build_listing"]
