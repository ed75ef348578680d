# -*- coding: utf-8 -*-


class PosError(Exception):
    """Tüm sanal POS hataları için base sınıf"""


class ConfigurationError(PosError):
    """Desteklenmeyen gateway veya hatalı formatter kaydı"""


class ParseError(PosError, ValueError):
    """Banka yanıtındaki değer beklenen formatta değil"""

    def __init__(self, raw_value, message=None):
        self.raw_value = raw_value
        super().__init__(message or f"Değer parse edilemedi: {raw_value!r}")
