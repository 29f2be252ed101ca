"""Heap sizes offered for the game's JVM (``-Xms`` / ``-Xmx``)."""

from __future__ import annotations

from enum import Enum
from typing import Optional

__all__ = ["JavaHeapSize"]


class JavaHeapSize(Enum):
    NOT_USED = ("", None)
    MB_256 = ("256 MB", "256m")
    MB_512 = ("512 MB", "512m")
    MB_768 = ("768 MB", "768m")
    GB_1 = ("1 GB", "1g")
    GB_1_5 = ("1.5 GB", "1536m")
    GB_2 = ("2 GB", "2g")
    GB_2_5 = ("2.5 GB", "2560m")
    GB_3 = ("3 GB", "3g")
    GB_4 = ("4 GB", "4g")
    GB_5 = ("5 GB", "5g")
    GB_6 = ("6 GB", "6g")
    GB_7 = ("7 GB", "7g")
    GB_8 = ("8 GB", "8g")
    GB_9 = ("9 GB", "9g")
    GB_10 = ("10 GB", "10g")
    GB_11 = ("11 GB", "11g")
    GB_12 = ("12 GB", "12g")
    GB_13 = ("13 GB", "13g")
    GB_14 = ("14 GB", "14g")
    GB_15 = ("15 GB", "15g")
    GB_16 = ("16 GB", "16g")

    def __init__(self, label: str, size_parameter: Optional[str]):
        self.label = label
        self.size_parameter = size_parameter

    def is_used(self) -> bool:
        return self.size_parameter is not None

    def __str__(self) -> str:  # pragma: no cover - display only
        return self.label
