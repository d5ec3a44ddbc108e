"""
Contains some useful utility functions used to read attribute values from validated instances.
"""
from .accessors import attribute_accessor, read_attribute
