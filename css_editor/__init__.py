"""css-editor: per-theme CSS generation from config records."""

__version__ = "1.0.0"
