"""Параметры запуска: сторона склейки, формат вывода и общий объект настроек.

Принципы:
- Настройки собираются один раз при старте и передаются явно, без глобального состояния.
- Значения опций проверяются здесь, до любого обращения к файловой системе.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple, Union

from combiner.errors import InputCountError, UnsupportedFormatError, UnsupportedModeError

MAX_INPUT_FILES = 9
JPEG_QUALITY = 90

DEFAULT_FORMAT = "png"
DEFAULT_SIDE = "bottom"
DEFAULT_OUT = "combined.png"


class StackMode(Enum):
    BOTTOM = "bottom"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Union[str, "StackMode"]) -> "StackMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedModeError(
                f"Неизвестная сторона склейки: {value!r}, выберите bottom или right"
            ) from None


class OutputFormat(Enum):
    PNG = "png"
    JPEG = "jpg"

    @classmethod
    def parse(cls, value: Union[str, "OutputFormat"]) -> "OutputFormat":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFormatError(
                f"Неизвестный формат вывода: {value!r}, выберите png или jpg"
            ) from None

    @property
    def pil_format(self) -> str:
        return "PNG" if self is OutputFormat.PNG else "JPEG"

    @property
    def pil_mode(self) -> str:
        # JPEG has no alpha channel
        return "RGBA" if self is OutputFormat.PNG else "RGB"

    @property
    def save_params(self) -> Dict[str, Any]:
        if self is OutputFormat.JPEG:
            return {"quality": JPEG_QUALITY}
        return {}

    @property
    def extensions(self) -> Tuple[str, ...]:
        return (".png",) if self is OutputFormat.PNG else (".jpg", ".jpeg")


@dataclass(frozen=True)
class CombineOptions:
    """Настройки одного запуска.

    Fields:
        files: Входные пути в порядке аргументов (он же порядок склейки).
        output_format: Формат выходного файла.
        stack_mode: Сторона, к которой приклеиваются изображения.
        out_path: Путь выходного файла.
        verbose: Подробный (DEBUG) лог.
    """
    files: Tuple[Path, ...]
    output_format: OutputFormat = OutputFormat.PNG
    stack_mode: StackMode = StackMode.BOTTOM
    out_path: Path = field(default_factory=lambda: Path(DEFAULT_OUT))
    verbose: bool = False

    @classmethod
    def build(
        cls,
        files: Sequence[Union[str, Path]],
        output_format: Union[str, OutputFormat] = DEFAULT_FORMAT,
        stack_mode: Union[str, StackMode] = DEFAULT_SIDE,
        out_path: Union[str, Path] = DEFAULT_OUT,
        verbose: bool = False,
    ) -> "CombineOptions":
        """Проверяет число файлов и значения опций, возвращает готовые настройки.

        Raises:
            InputCountError: если файлов нет или их больше `MAX_INPUT_FILES`.
            UnsupportedModeError: если сторона не bottom/right.
            UnsupportedFormatError: если формат не png/jpg.
        """
        if not files:
            raise InputCountError("Не указаны входные файлы")
        if len(files) > MAX_INPUT_FILES:
            raise InputCountError(
                f"Слишком много входных файлов: {len(files)}, максимум {MAX_INPUT_FILES}"
            )
        return cls(
            files=tuple(Path(f) for f in files),
            output_format=OutputFormat.parse(output_format),
            stack_mode=StackMode.parse(stack_mode),
            out_path=Path(out_path),
            verbose=verbose,
        )

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> "CombineOptions":
        return cls.build(
            files=ns.files,
            output_format=ns.format,
            stack_mode=ns.side,
            out_path=ns.out,
            verbose=ns.verbose,
        )
