# -*- coding: utf-8 -*-

import logging
import math
import re
from datetime import datetime

from ...exceptions import ParseError
from ..registry import to_gateway

_logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')
_INTEGER_RE = re.compile(r'^[+-]?\d+$')
_TZ_OFFSET_RE = re.compile(r'(Z|[+-]\d{2}:\d{2})$')
_FRACTION_RE = re.compile(r'(?<=:\d{2})\.(\d+)$')

# Bankaların yanıtlarında gördüğümüz tarih formatları, basamak sayıları sabit
DATETIME_FORMATS = (
    # 2024-04-23T16:14:00.264 (Akbank, Kuveyt, VakifKatilim)
    ('%Y-%m-%dT%H:%M:%S', re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}')),
    # 2022-10-30 12:29:53.773 (Est, Garanti, PosNet)
    ('%Y-%m-%d %H:%M:%S', re.compile(r'\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}')),
    # 2019-11-0813:58:37.909 (PosNetV1)
    ('%Y-%m-%d%H:%M:%S', re.compile(r'\d{4}-\d{2}-\d{4}:\d{2}:\d{2}')),
    # 20221101 13:14:19 (Garanti, Est)
    ('%Y%m%d %H:%M:%S', re.compile(r'\d{8} \d{2}:\d{2}:\d{2}')),
    # 20230309221037 (PayFlexCPV4, Tosla)
    ('%Y%m%d%H%M%S', re.compile(r'\d{14}')),
    # 09.08.2024 10:40:34 (InterPos, PayFor, ParamPos)
    ('%d.%m.%Y %H:%M:%S', re.compile(r'\d{2}\.\d{2}\.\d{4} \d{2}:\d{2}:\d{2}')),
)


class BaseResponseValueFormatter:
    """
    Banka yanıtlarındaki tutar, taksit ve tarih değerlerini
    ortak formata çeviren formatter'ların base sınıfı.

    Formatter'lar state tutmaz, aynı instance farklı thread'lerden
    kullanılabilir.
    """

    #: Bu formatter'ın sorumlu olduğu gateway'ler
    gateways = frozenset()

    @classmethod
    def supports(cls, gateway):
        """Gateway bu formatter tarafından destekleniyor mu"""
        return to_gateway(gateway) in cls.gateways

    def format_amount(self, raw_value, tx_type=None):
        """
        Tutarı float'a çevir, ölçekleme yapılmaz.

        Args:
            raw_value: bankadan gelen tutar ("1.00", 1001, ...)
            tx_type: yanıtı üreten işlem tipi

        Returns:
            float: ana para birimi cinsinden tutar
        """
        return self._to_float(raw_value)

    def format_installment(self, raw_value, tx_type=None):
        """
        Taksit sayısını int'e çevir.

        0 ve 1 peşin anlamına gelir ve 0 döner.
        Alan hiç gelmemişse (None / boş) yine peşin kabul edilir.
        """
        if raw_value is None or raw_value == '':
            return 0

        installment = self._to_int(raw_value)

        return installment if installment > 1 else 0

    def format_datetime(self, raw_value, tx_type=None):
        """
        Tarih string'ini timezone'suz datetime'a çevir.

        Sadece DATETIME_FORMATS içindeki formatlar kabul edilir.
        Kesirli saniye mikrosaniyeye yuvarlanmadan kesilir,
        saat dilimi bilgisi atılır (banka yerel saati korunur).
        """
        if not isinstance(raw_value, str) or not raw_value.strip():
            _logger.error(f"Geçersiz tarih değeri: {raw_value!r}")
            raise ParseError(raw_value, f"Tarih parse edilemedi: {raw_value!r}")

        value = _TZ_OFFSET_RE.sub('', raw_value.strip())

        microsecond = 0
        match = _FRACTION_RE.search(value)
        if match:
            microsecond = int(match.group(1)[:6].ljust(6, '0'))
            value = value[:match.start()]

        for fmt, pattern in DATETIME_FORMATS:
            if not pattern.fullmatch(value):
                continue
            try:
                parsed = datetime.strptime(value, fmt)
            except ValueError:
                continue
            return parsed.replace(microsecond=microsecond)

        _logger.error(f"Bilinmeyen tarih formatı: {raw_value!r}")
        raise ParseError(raw_value, f"Tarih parse edilemedi: {raw_value!r}")

    @staticmethod
    def _to_float(raw_value):
        """Ondalık sayıyı float'a çevir, hatalı değerde ParseError"""
        if isinstance(raw_value, bool):
            raise ParseError(raw_value)

        if isinstance(raw_value, (int, float)) and math.isfinite(raw_value):
            return float(raw_value)

        if isinstance(raw_value, str) and _NUMBER_RE.match(raw_value.strip()):
            return float(raw_value.strip())

        _logger.error(f"Geçersiz tutar değeri: {raw_value!r}")
        raise ParseError(raw_value, f"Tutar parse edilemedi: {raw_value!r}")

    @staticmethod
    def _to_int(raw_value):
        """Tam sayıyı int'e çevir, hatalı değerde ParseError"""
        if isinstance(raw_value, bool):
            raise ParseError(raw_value)

        if isinstance(raw_value, int):
            return raw_value

        if isinstance(raw_value, float) and raw_value.is_integer():
            return int(raw_value)

        if isinstance(raw_value, str) and _INTEGER_RE.match(raw_value.strip()):
            return int(raw_value.strip())

        _logger.error(f"Geçersiz taksit değeri: {raw_value!r}")
        raise ParseError(raw_value, f"Taksit parse edilemedi: {raw_value!r}")

    @classmethod
    def _from_minor_units(cls, raw_value):
        """Kuruş cinsinden tutarı ana birime çevir: 10001 -> 100.01"""
        return cls._to_float(raw_value) / 100

    @classmethod
    def _from_european_notation(cls, raw_value):
        """
        Binlik ayracı nokta, ondalık ayracı virgül olan tutarı çevir:
        "1.056,2" -> 1056.2
        """
        if not isinstance(raw_value, str):
            return cls._to_float(raw_value)

        return cls._to_float(raw_value.replace('.', '').replace(',', '.'))
