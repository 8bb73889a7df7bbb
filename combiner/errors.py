"""Ошибки конвейера склейки изображений.

Принципы:
- Каждый сервис поднимает своё исключение и не завершает процесс сам.
- Единственная точка обработки `CombinerApp.run`: она печатает диагностику и код выхода.
"""
from __future__ import annotations


class CombineError(Exception):
    """Базовая ошибка: любая из них фатальна для запуска."""


class InputCountError(CombineError):
    """Файлы не переданы или их больше допустимого."""


class InputFileError(CombineError):
    """Входной файл не существует, является каталогом или не открывается."""


class DecodeError(CombineError):
    """Содержимое файла не является поддерживаемым растровым форматом."""


class EmptyDimensionError(CombineError):
    """Суммарные ширина и высота равны нулю."""


class UnsupportedModeError(CombineError):
    """Сторона склейки не из {bottom, right}."""


class UnsupportedFormatError(CombineError):
    """Формат вывода не из {png, jpg}."""


class OutputFileError(CombineError):
    """Не удалось создать выходной файл."""


class EncodeError(CombineError):
    """Кодек не смог записать изображение."""
