"""Image writer for generated buffers."""

from pathlib import Path

from shapesmith.domain import PixelBuffer
from shapesmith.exceptions import ImageSaveError


class ImageWriter:
    """Saves generated buffers as PNG files.

    Example:
        writer = ImageWriter(buffer, Path("star.png"))
        writer.save()
    """

    def __init__(self, buffer: PixelBuffer, output_path: Path) -> None:
        """Initialize the image writer.

        Args:
            buffer: Generated image
            output_path: Destination file
        """
        self._buffer = buffer
        self._output_path = output_path

    @property
    def dpi(self) -> tuple[int, int]:
        """Resolution hint so viewers show the image at its logical size."""
        value = round(72 * self._buffer.scale)
        return (value, value)

    def save(self) -> Path:
        """Write the PNG file, creating parent directories as needed.

        Returns:
            Path of the written file

        Raises:
            ImageSaveError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._buffer.image.save(self._output_path, format="PNG", dpi=self.dpi)
        except OSError as e:
            raise ImageSaveError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def get_default_path(kind: str, directory: Path | None = None) -> Path:
        """Get the default output path for a shape.

        Args:
            kind: Shape name, used as the file stem
            directory: Output directory (default: current directory)

        Returns:
            Path such as 'star.png'
        """
        return (directory or Path(".")) / f"{kind}.png"
