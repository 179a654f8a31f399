"""NOVA space story backend: personalized story and narration generation."""

__version__ = "0.1.0"
