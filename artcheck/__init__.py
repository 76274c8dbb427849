"""
Backend package for the art validation API.

This package provides a FastAPI application exposing users and cases through
a router -> controller -> service -> repository stack, with interchangeable
JSON-file and relational storage backends underneath.
"""
