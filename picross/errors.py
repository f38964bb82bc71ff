"""Exception types raised by the picross pipeline."""


class PicrossError(Exception):
    """Base class for picross errors."""


class InvalidImageBufferError(PicrossError, ValueError):
    """Pixel buffer does not match the declared width and height."""


class ImageAcquisitionError(PicrossError, ValueError):
    """Pixel data could not be obtained from the image source."""
