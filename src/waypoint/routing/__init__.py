"""Routing — schema model, path matching, page resolution, reverse URLs.

The schema is validated and compiled once into immutable route
definitions; every resolution is a pure function of the schema and
its arguments.
"""
