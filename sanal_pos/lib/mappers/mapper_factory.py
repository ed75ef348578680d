# -*- coding: utf-8 -*-

import logging

from ...exceptions import ConfigurationError
from ..registry import build_registry, to_gateway
from .akbank_mapper import AkbankPosResponseValueMapper
from .boa_mapper import BoaPosResponseValueMapper
from .default_mapper import DefaultResponseValueMapper
from .estpos_mapper import EstPosResponseValueMapper
from .garanti_mapper import GarantiPosResponseValueMapper
from .parampos_mapper import ParamPosResponseValueMapper
from .posnet_mapper import PosNetPosResponseValueMapper, PosNetV1PosResponseValueMapper
from .tosla_mapper import ToslaPosResponseValueMapper

_logger = logging.getLogger(__name__)

MAPPER_CLASSES = (
    AkbankPosResponseValueMapper,
    BoaPosResponseValueMapper,
    DefaultResponseValueMapper,
    EstPosResponseValueMapper,
    GarantiPosResponseValueMapper,
    ParamPosResponseValueMapper,
    PosNetPosResponseValueMapper,
    PosNetV1PosResponseValueMapper,
    ToslaPosResponseValueMapper,
)


class ResponseValueMapperFactory:
    """Gateway için doğru yanıt değeri mapper'ını seçer"""

    MAPPER_MAP = build_registry(MAPPER_CLASSES)

    @staticmethod
    def create(gateway_type):
        """
        Mapper getir

        Args:
            gateway_type (Gateway|str): Gateway tipi

        Returns:
            BaseResponseValueMapper: İlgili mapper instance
        """
        gateway = to_gateway(gateway_type)

        if gateway is None:
            _logger.error(f"Desteklenmeyen gateway tipi: {gateway_type}")
            raise ConfigurationError(f"Desteklenmeyen gateway tipi: {gateway_type}")

        return ResponseValueMapperFactory.MAPPER_MAP[gateway]
