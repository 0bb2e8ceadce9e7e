"""Mobile-friendly gallery builder for Picotron HTML exports."""

__version__ = "0.1.0"
