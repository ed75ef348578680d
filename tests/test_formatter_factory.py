# -*- coding: utf-8 -*-

import unittest

import sanal_pos
from sanal_pos.constants import Gateway, TxType
from sanal_pos.exceptions import ConfigurationError
from sanal_pos.lib.formatters import (
    BasicResponseValueFormatter,
    BoaPosResponseValueFormatter,
    EstPosResponseValueFormatter,
    GarantiPosResponseValueFormatter,
    InterPosResponseValueFormatter,
    ParamPosResponseValueFormatter,
    PosNetResponseValueFormatter,
    ResponseValueFormatterFactory,
    ToslaPosResponseValueFormatter,
)
from sanal_pos.lib.formatters.formatter_factory import FORMATTER_CLASSES
from sanal_pos.lib.registry import build_registry

EXPECTED_FORMATTERS = {
    Gateway.AKBANK_POS: BasicResponseValueFormatter,
    Gateway.EST_POS: EstPosResponseValueFormatter,
    Gateway.EST_V3_POS: EstPosResponseValueFormatter,
    Gateway.GARANTI_POS: GarantiPosResponseValueFormatter,
    Gateway.INTERPOS: InterPosResponseValueFormatter,
    Gateway.KUVEYT_POS: BoaPosResponseValueFormatter,
    Gateway.KUVEYT_SOAP_API_POS: BoaPosResponseValueFormatter,
    Gateway.PARAM_POS: ParamPosResponseValueFormatter,
    Gateway.PAYFLEX_CP_V4: BasicResponseValueFormatter,
    Gateway.PAYFLEX_V4: BasicResponseValueFormatter,
    Gateway.PAYFOR: BasicResponseValueFormatter,
    Gateway.POSNET: PosNetResponseValueFormatter,
    Gateway.POSNET_V1: PosNetResponseValueFormatter,
    Gateway.TOSLA: ToslaPosResponseValueFormatter,
    Gateway.VAKIF_KATILIM: BoaPosResponseValueFormatter,
}


class TestFormatterFactory(unittest.TestCase):
    """Gateway'e göre formatter seçimi testleri"""

    def test_create_for_gateway(self):
        """Her gateway doğru formatter'ı alır"""
        for gateway, formatter_class in EXPECTED_FORMATTERS.items():
            with self.subTest(gateway=gateway):
                formatter = ResponseValueFormatterFactory.create(gateway)
                self.assertIsInstance(formatter, formatter_class)
                self.assertTrue(formatter.supports(gateway))

    def test_create_with_gateway_code(self):
        """Gateway string kodu ile de seçilebilir"""
        formatter = ResponseValueFormatterFactory.create('garanti_pos')
        self.assertIsInstance(formatter, GarantiPosResponseValueFormatter)

    def test_shared_instance(self):
        """Aynı aileden gateway'ler aynı formatter instance'ını paylaşır"""
        self.assertIs(
            ResponseValueFormatterFactory.create(Gateway.POSNET),
            ResponseValueFormatterFactory.create(Gateway.POSNET_V1),
        )

    def test_unknown_gateway(self):
        """Bilinmeyen gateway varsayılana düşmez"""
        for gateway_type in ('bilinmeyen_pos', '', None, 42):
            with self.subTest(gateway_type=gateway_type):
                with self.assertRaises(ConfigurationError):
                    ResponseValueFormatterFactory.create(gateway_type)

    def test_resolve(self):
        self.assertIsInstance(sanal_pos.resolve('tosla'), ToslaPosResponseValueFormatter)
        with self.assertRaises(ConfigurationError):
            sanal_pos.resolve('akode')

    def test_supported_gateways(self):
        supported = ResponseValueFormatterFactory.get_supported_gateways()
        self.assertEqual(sorted(supported), sorted(gateway.value for gateway in Gateway))
        self.assertTrue(ResponseValueFormatterFactory.is_supported('payfor'))
        self.assertFalse(ResponseValueFormatterFactory.is_supported('akode'))

    def test_claims_are_exclusive(self):
        """Her gateway'i tam olarak bir formatter sahiplenir"""
        for gateway in Gateway:
            with self.subTest(gateway=gateway):
                owners = [klass for klass in FORMATTER_CLASSES if klass.supports(gateway)]
                self.assertEqual(len(owners), 1)

    def test_registry_rejects_overlap(self):
        """Çakışan kayıt ConfigurationError verir"""

        class OverlappingFormatter(BasicResponseValueFormatter):
            gateways = frozenset({Gateway.GARANTI_POS})

        with self.assertRaises(ConfigurationError):
            build_registry(FORMATTER_CLASSES + (OverlappingFormatter,))

    def test_registry_rejects_missing_gateway(self):
        """Eksik kayıt ConfigurationError verir"""
        classes = tuple(klass for klass in FORMATTER_CLASSES if klass is not ToslaPosResponseValueFormatter)
        with self.assertRaises(ConfigurationError):
            build_registry(classes)


class TestFormatterProperties(unittest.TestCase):
    """Tüm gateway'ler için geçerli olması gereken özellikler"""

    RAW_INSTALLMENTS = (None, '', '0', '1', '2', '3', '12', '-1', 0, 1, 9)

    def test_installment_never_one_or_negative(self):
        """Taksit sonucu hiçbir zaman 1 veya negatif olmaz"""
        for gateway in Gateway:
            formatter = ResponseValueFormatterFactory.create(gateway)
            for tx_type in TxType:
                for raw in self.RAW_INSTALLMENTS:
                    with self.subTest(gateway=gateway, tx_type=tx_type, raw=raw):
                        try:
                            installment = formatter.format_installment(raw, tx_type)
                        except NotImplementedError:
                            self.assertIn(gateway, (Gateway.INTERPOS, Gateway.TOSLA))
                            continue
                        self.assertNotEqual(installment, 1)
                        self.assertGreaterEqual(installment, 0)
                        self.assertIsInstance(installment, int)

    def test_double_formatting_changes_amount(self):
        """Ölçekleme kuralları iki kez uygulanınca değer değişir"""
        cases = [
            (Gateway.GARANTI_POS, TxType.PAY_AUTH, '100001'),
            (Gateway.TOSLA, TxType.PAY_AUTH, '100001'),
            (Gateway.KUVEYT_POS, TxType.PAY_AUTH, '10001'),
            (Gateway.EST_V3_POS, TxType.STATUS, '1001'),
            (Gateway.POSNET, TxType.PAY_AUTH, '10001'),
            (Gateway.INTERPOS, TxType.PAY_AUTH, '1.056,2'),
        ]
        for gateway, tx_type, raw in cases:
            with self.subTest(gateway=gateway, tx_type=tx_type):
                formatter = ResponseValueFormatterFactory.create(gateway)
                once = formatter.format_amount(raw, tx_type)
                twice = formatter.format_amount(str(once), tx_type)
                self.assertNotEqual(once, twice)

    def test_scenarios(self):
        """Örnek senaryolar"""
        create = ResponseValueFormatterFactory.create

        self.assertEqual(create(Gateway.VAKIF_KATILIM).format_amount('10001', TxType.PAY_AUTH), 100.01)
        self.assertEqual(create(Gateway.VAKIF_KATILIM).format_amount('10001', TxType.STATUS), 10001.0)
        self.assertEqual(create(Gateway.GARANTI_POS).format_amount('100001', TxType.CANCEL), 1000.01)
        self.assertEqual(create(Gateway.INTERPOS).format_amount('1.056,2', TxType.PAY_AUTH), 1056.2)
        self.assertEqual(create(Gateway.POSNET_V1).format_amount('100001', TxType.STATUS), 100001.0)
        self.assertEqual(create(Gateway.GARANTI_POS).format_installment(None, TxType.PAY_AUTH), 0)
        self.assertEqual(create(Gateway.GARANTI_POS).format_installment('Pesin', TxType.HISTORY), 0)
        self.assertEqual(create(Gateway.GARANTI_POS).format_installment('1', TxType.HISTORY), 0)
        self.assertEqual(create(Gateway.GARANTI_POS).format_installment('3', TxType.PAY_AUTH), 3)
        self.assertEqual(create(Gateway.PAYFOR).format_installment('1', TxType.PAY_AUTH), 0)
        self.assertEqual(create(Gateway.PAYFOR).format_installment('12', TxType.PAY_AUTH), 12)

        with self.assertRaises(NotImplementedError):
            create(Gateway.TOSLA).format_installment('3', TxType.PAY_AUTH)
