# -*- coding: utf-8 -*-

import logging

from ..exceptions import ConfigurationError, PosError
from ..lib.formatters.formatter_factory import ResponseValueFormatterFactory
from ..lib.mappers.mapper_factory import ResponseValueMapperFactory
from ..lib.xml_utils import XmlUtils

_logger = logging.getLogger(__name__)

VALUE_KINDS = ('amount', 'installment', 'datetime', 'currency', 'order_status')


class ResponseValueService:
    """Banka yanıtındaki değerleri gateway'e göre normalize eden servis"""

    def __init__(self, config):
        """
        Args:
            config (dict): {'gateway_type': 'garanti_pos'}
        """
        self.config = config
        self.gateway_type = config.get('gateway_type')
        self.formatter = ResponseValueFormatterFactory.create(self.gateway_type)
        self.mapper = ResponseValueMapperFactory.create(self.gateway_type)

        _logger.info(
            f"Yanıt servisi hazır: {self.gateway_type}, "
            f"formatter: {type(self.formatter).__name__}, mapper: {type(self.mapper).__name__}"
        )

    def format_amount(self, raw_value, tx_type=None):
        return self.formatter.format_amount(raw_value, tx_type)

    def format_installment(self, raw_value, tx_type=None):
        return self.formatter.format_installment(raw_value, tx_type)

    def format_datetime(self, raw_value, tx_type=None):
        return self.formatter.format_datetime(raw_value, tx_type)

    def map_currency(self, raw_value, tx_type=None):
        return self.mapper.map_currency(raw_value, tx_type)

    def map_order_status(self, raw_value, tx_type=None, **kwargs):
        return self.mapper.map_order_status(raw_value, tx_type, **kwargs)

    def normalize(self, payload, tx_type, field_map):
        """
        Yanıttaki alanları okuyup normalize et

        Args:
            payload (dict|str|bytes): dict'e çevrilmiş yanıt veya ham XML/SOAP gövdesi
            tx_type (TxType|str): yanıtı üreten işlem tipi
            field_map (dict): {'amount': 'GVPSResponse/Transaction/Amount', ...}
                anahtar VALUE_KINDS dışında ise değer (tip, yol) olmalı:
                {'refund_amount': ('amount', 'Order/RefundAmount')}

        Returns:
            dict: aynı anahtarlarla normalize edilmiş değerler,
                yanıtta olmayan alanlar None
        """
        if isinstance(payload, (str, bytes)):
            payload = XmlUtils.parse_soap_response(payload)

        _logger.debug(f"Normalize edilecek yanıt ({self.gateway_type}, {tx_type}): {payload}")

        result = {}
        for key, entry in field_map.items():
            kind, path = self._resolve_field(key, entry)
            raw_value = XmlUtils.get_value(payload, path)

            if raw_value is None and kind != 'installment':
                result[key] = None
                continue

            try:
                result[key] = self._convert(kind, raw_value, tx_type)
            except PosError:
                _logger.error(f"Alan normalize edilemedi: {key} ({path}) = {raw_value!r}")
                raise

        return result

    @staticmethod
    def _resolve_field(key, entry):
        if isinstance(entry, str):
            kind, path = key, entry
        else:
            kind, path = entry

        if kind not in VALUE_KINDS:
            raise ConfigurationError(f"Bilinmeyen alan tipi: {kind}")

        return kind, path

    def _convert(self, kind, raw_value, tx_type):
        if kind == 'amount':
            return self.format_amount(raw_value, tx_type)
        if kind == 'installment':
            return self.format_installment(raw_value, tx_type)
        if kind == 'datetime':
            return self.format_datetime(raw_value, tx_type)
        if kind == 'currency':
            return self.map_currency(raw_value, tx_type)

        return self.map_order_status(raw_value, tx_type)
