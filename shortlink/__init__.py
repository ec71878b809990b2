"""URL shortener service: save URLs under short aliases and redirect to them."""

__version__ = "1.0.0"
