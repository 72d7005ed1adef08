"""seotag - SEO and social metadata resolution for static site pages."""

__version__ = "0.1.0"
