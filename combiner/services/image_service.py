"""Загрузка изображений с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за загрузку и базовое извлечение свойств.
- Файл открывается в `with` и закрывается сразу после декодирования, даже при ошибке.
- Формат определяется по содержимому, а не по расширению.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from combiner.errors import DecodeError, InputFileError
from combiner.models.image_model import ImageData

logger = logging.getLogger(__name__)

SUPPORTED_INPUT_FORMATS: Tuple[str, ...] = ("PNG", "JPEG")


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами, режимом и размером файла.

        Raises:
            InputFileError: если путь не существует, указывает на каталог или не открывается.
            DecodeError: если файл не распознан как PNG/JPEG или повреждён.
        """
        path = Path(file_path)
        if not path.exists():
            raise InputFileError(f"Файл не найден: {path}")
        if path.is_dir():
            raise InputFileError(f"Путь указывает на каталог: {path}")

        try:
            with Image.open(path, formats=SUPPORTED_INPUT_FORMATS) as src:
                source_format = src.format or ""
                mode = src.mode
                # convert() forces a full decode while the handle is still open
                pil_image = src.convert("RGBA")
        except Image.DecompressionBombError as exc:
            raise DecodeError(f"Изображение слишком велико для декодирования: {path}: {exc}") from exc
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Файл не является изображением PNG/JPEG: {path}") from exc
        except PermissionError as exc:
            raise InputFileError(f"Не удалось открыть файл: {path}") from exc
        except (OSError, EOFError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"Не удалось декодировать {path}: {exc}") from exc

        width, height = pil_image.size
        if width <= 0 or height <= 0:
            raise DecodeError(f"Изображение без пикселей: {path}")
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.debug(
            "Loaded %s: %s %s %dx%d, %s bytes", path, source_format, mode, width, height, size_bytes
        )
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=mode,
            source_format=source_format,
            size_bytes=size_bytes,
        )
