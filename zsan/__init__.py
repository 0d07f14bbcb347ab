"""Compact lossless encoding for ASCII text dominated by spaces and numbers.

The codec lives in ``zsan.codec``. The building blocks are in ``zsan.vle``,
``zsan.space``, ``zsan.markers``, ``zsan.parser`` and ``zsan.numerical``.
"""

__version__ = "0.1.0"