"""Command-line options, logging, value parsing, error collection and reference-page generation for an HAProxy-based ingress controller."""

__version__ = "0.1.0"