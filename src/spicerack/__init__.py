"""
Spicerack spice-jar organizer package.

The package balances a household's spice jars across alphabetical shelves, offers
typo-tolerant lookup against the canonical spice catalog, and exposes both through
an HTTP API and a command-line interface.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
