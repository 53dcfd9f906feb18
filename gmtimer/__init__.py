"""Local-mean binarization of 8-bit grayscale BMP images and simple code timers."""

__version__ = "0.1.0"
__all__ = ["bmp", "binarize", "color", "output", "timer", "demo"]