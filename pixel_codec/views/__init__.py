"""Report views, one per module.

A module here that defines a module-level `view` (a View) is picked up by
pixel_codec.registry; the module docstring doubles as its `help` page.
"""
