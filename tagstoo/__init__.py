"""
Template tags for page-aware Django templates.

Load them in a template with ``{% load tagstoo_tags %}``.
"""

__version__ = "0.1.0"
