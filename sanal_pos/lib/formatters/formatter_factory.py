# -*- coding: utf-8 -*-

import logging

from ...exceptions import ConfigurationError
from ..registry import build_registry, to_gateway
from .basic_formatter import BasicResponseValueFormatter
from .boa_formatter import BoaPosResponseValueFormatter
from .estpos_formatter import EstPosResponseValueFormatter
from .garanti_formatter import GarantiPosResponseValueFormatter
from .interpos_formatter import InterPosResponseValueFormatter
from .parampos_formatter import ParamPosResponseValueFormatter
from .posnet_formatter import PosNetResponseValueFormatter
from .tosla_formatter import ToslaPosResponseValueFormatter

_logger = logging.getLogger(__name__)

FORMATTER_CLASSES = (
    BasicResponseValueFormatter,
    BoaPosResponseValueFormatter,
    EstPosResponseValueFormatter,
    GarantiPosResponseValueFormatter,
    InterPosResponseValueFormatter,
    ParamPosResponseValueFormatter,
    PosNetResponseValueFormatter,
    ToslaPosResponseValueFormatter,
)


class ResponseValueFormatterFactory:
    """Gateway için doğru yanıt değeri formatter'ını seçer"""

    # Import sırasında bir kez oluşturulur, sonra değişmez
    FORMATTER_MAP = build_registry(FORMATTER_CLASSES)

    @staticmethod
    def create(gateway_type):
        """
        Formatter getir

        Args:
            gateway_type (Gateway|str): Gateway tipi

        Returns:
            BaseResponseValueFormatter: İlgili formatter instance
        """
        gateway = to_gateway(gateway_type)

        if gateway is None:
            _logger.error(f"Desteklenmeyen gateway tipi: {gateway_type}")
            raise ConfigurationError(f"Desteklenmeyen gateway tipi: {gateway_type}")

        return ResponseValueFormatterFactory.FORMATTER_MAP[gateway]

    @staticmethod
    def get_supported_gateways():
        """Desteklenen gateway listesini döndür"""
        return [gateway.value for gateway in ResponseValueFormatterFactory.FORMATTER_MAP]

    @staticmethod
    def is_supported(gateway_type):
        """Gateway'in desteklenip desteklenmediğini kontrol et"""
        return to_gateway(gateway_type) is not None
