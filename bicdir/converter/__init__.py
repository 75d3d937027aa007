from .runner import main
from .config import ExtractConfig
from .errors import BicExtractError, ContainerError, LayoutMismatchError, OutputWriteError, PageReadError
from .models import HEADERS
from .pipeline import BicDirectoryExtractor, convert_to_csv, extract, headers

__all__ = [
    "BicDirectoryExtractor",
    "ExtractConfig",
    "HEADERS",
    "BicExtractError",
    "ContainerError",
    "PageReadError",
    "LayoutMismatchError",
    "OutputWriteError",
    "extract",
    "convert_to_csv",
    "headers",
    "main",
]
