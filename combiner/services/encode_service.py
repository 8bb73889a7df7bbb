"""Запись готового холста на диск в выбранном формате.

Принципы:
- Формат проверяется до создания файла: при неверном формате на диске ничего не появляется.
- Файл закрывается при любом исходе; недописанный файл удаляется.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from PIL import Image

from combiner.errors import EncodeError, OutputFileError
from combiner.models.options_model import OutputFormat

logger = logging.getLogger(__name__)


class EncodeService:
    def encode(self, canvas: Image.Image, fmt: Union[OutputFormat, str], out_path: str | Path) -> Path:
        """Кодирует холст в PNG (без потерь) или JPEG (качество 90).

        Args:
            canvas: Склеенное изображение.
            fmt: `OutputFormat` или его строковое значение ("png" | "jpg").
            out_path: Путь выходного файла; существующий файл перезаписывается.

        Returns:
            Путь записанного файла.

        Raises:
            UnsupportedFormatError: если формат не png/jpg (файл не создаётся).
            OutputFileError: если файл не удалось создать.
            EncodeError: если кодек не смог записать данные.
        """
        output_format = OutputFormat.parse(fmt)
        path = Path(out_path)
        image = canvas if canvas.mode == output_format.pil_mode else canvas.convert(output_format.pil_mode)

        try:
            handle = path.open("wb")
        except OSError as exc:
            raise OutputFileError(f"Не удалось создать файл {path}: {exc}") from exc

        try:
            with handle:
                image.save(handle, format=output_format.pil_format, **output_format.save_params)
        except (OSError, ValueError) as exc:
            path.unlink(missing_ok=True)
            raise EncodeError(f"Не удалось записать {path} как {output_format.value}: {exc}") from exc

        logger.debug("Encoded %s as %s", path, output_format.pil_format)
        return path
