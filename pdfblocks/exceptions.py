"""Custom exceptions for pdfblocks."""

from typing import Any, Optional


class PDFBlocksError(Exception):
    """Base exception for pdfblocks errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(PDFBlocksError):
    """Exception raised while reading a tree from JSON or a mapping."""

    def __init__(self, message: str, details: Optional[str] = None, value: Any = None):
        super().__init__(message, details)
        self.value = value


class UnsupportedBlockTypeError(ParsingError):
    """Exception raised when a block ``type`` has no registered variant."""

    def __init__(self, block_type: Any):
        super().__init__("Unsupported block type", repr(block_type), value=block_type)
        self.block_type = block_type


class LayoutError(PDFBlocksError):
    """Exception raised when computed boxes fail validation."""

    pass


class RenderingError(PDFBlocksError):
    """Exception raised when the PDF document cannot be produced."""

    pass
