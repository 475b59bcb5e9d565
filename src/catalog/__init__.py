"""Release catalog API: products, releases and the images built for them."""

__version__ = "0.1.0"
