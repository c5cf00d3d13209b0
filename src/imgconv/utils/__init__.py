from .image_formats import ImageFormat
from .logging_setup import setup_logging
from .profiling import timed

__all__ = ["ImageFormat", "setup_logging", "timed"]
