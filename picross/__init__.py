"""Convert raster images into picross (nonogram) boards."""

from .errors import ImageAcquisitionError, InvalidImageBufferError, PicrossError
from .image_processing import (
    ImageProcessor,
    process_image_data,
    process_image_file,
    recalculate_clue_colors,
)
from .models import (
    BoardPolicy,
    BoundingBox,
    PicrossBoardData,
    PicrossCellData,
    PicrossClueData,
    PicrossRowData,
    PixelData,
    ProcessingConfig,
    ProcessingResult,
)

__all__ = [
    "BoardPolicy",
    "BoundingBox",
    "ImageAcquisitionError",
    "ImageProcessor",
    "InvalidImageBufferError",
    "PicrossBoardData",
    "PicrossCellData",
    "PicrossClueData",
    "PicrossError",
    "PicrossRowData",
    "PixelData",
    "ProcessingConfig",
    "ProcessingResult",
    "process_image_data",
    "process_image_file",
    "recalculate_clue_colors",
]
