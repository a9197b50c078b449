"""pptb-scaffold - project generator for Power Platform Tool Box tools."""

__version__ = "0.1.0"
