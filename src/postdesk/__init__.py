"""POSTDESK

A small blog-post API. Authenticated users publish posts tagged with
categories; every post receives a unique, URL-safe slug derived from its
title, and only the owner of a post may change or delete it.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
