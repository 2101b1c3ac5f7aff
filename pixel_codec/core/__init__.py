"""pixel_codec.core — Foundation layer.

Contains the codec functions, level catalog, type definitions, exhibit
pipeline, rasterizer and report builder.
This module has NO dependencies on pixel_codec.views or pixel_codec.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
