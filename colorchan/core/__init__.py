"""colorchan.core — Foundation layer.

Contains the scalar formats, channel kinds, colour types, conversion
engine, Y'CbCr models, configuration and report builder.
This module has NO dependencies on colorchan.models or colorchan.registry.
Only stdlib and numpy are allowed here.
"""
