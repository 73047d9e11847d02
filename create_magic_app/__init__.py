"""create-magic-app -- scaffold MagicBlock / Anchor + React starter projects."""

__version__ = "0.1.0"
