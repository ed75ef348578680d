# -*- coding: utf-8 -*-

from .constants import Currency, Gateway, PaymentStatus, TxType
from .exceptions import ConfigurationError, ParseError, PosError
from .lib.formatters.formatter_factory import ResponseValueFormatterFactory
from .lib.mappers.mapper_factory import ResponseValueMapperFactory
from .services.response_value_service import ResponseValueService


def resolve(gateway_type):
    """Gateway'in yanıt değeri formatter'ını döndür"""
    return ResponseValueFormatterFactory.create(gateway_type)
