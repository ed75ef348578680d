# -*- coding: utf-8 -*-

from lxml import etree
import logging

from ..exceptions import ParseError

_logger = logging.getLogger(__name__)

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True, remove_pis=True)

SOAP_NAMESPACES = {
    'soap': 'http://schemas.xmlsoap.org/soap/envelope/',
    'soap12': 'http://www.w3.org/2003/05/soap-envelope',
}


class XmlUtils:
    """Bankadan alınmış XML yanıtlarını dict'e çeviren yardımcı sınıf"""

    @staticmethod
    def xml_to_dict(xml_string):
        """XML'i dictionary'ye çevir, kök eleman anahtar olarak korunur"""
        root = XmlUtils._parse(xml_string)
        return {etree.QName(root).localname: XmlUtils._parse_xml_element(root)}

    @staticmethod
    def parse_soap_response(xml_string):
        """SOAP response'un Body içindeki ilk elemanı dict olarak döndür"""
        root = XmlUtils._parse(xml_string)

        body = root.find('.//soap:Body', SOAP_NAMESPACES)
        if body is None:
            body = root.find('.//soap12:Body', SOAP_NAMESPACES)

        if body is not None:
            for child in body.iterchildren(etree.Element):
                return {etree.QName(child).localname: XmlUtils._parse_xml_element(child)}

        return {etree.QName(root).localname: XmlUtils._parse_xml_element(root)}

    @staticmethod
    def get_value(data, path, default=None):
        """
        "/" ile ayrılmış yoldaki değeri getir

        Örnek: get_value(data, 'GVPSResponse/Transaction/Amount')
        Tekrarlanan elemanlarda index kullanılabilir: 'Orders/OrderInfo/0/Amount'
        """
        current = data

        for key in path.strip('/').split('/'):
            if isinstance(current, dict):
                if key not in current:
                    return default
                current = current[key]
            elif isinstance(current, list) and key.isdigit():
                index = int(key)
                if index >= len(current):
                    return default
                current = current[index]
            else:
                return default

        return current

    @staticmethod
    def _parse(xml_string):
        if isinstance(xml_string, str):
            xml_string = xml_string.encode('utf-8')

        try:
            return etree.fromstring(xml_string, _PARSER)
        except etree.XMLSyntaxError as e:
            _logger.error(f"XML parse hatası: {str(e)}")
            raise ParseError(xml_string, f"XML parse hatası: {str(e)}") from e

    @staticmethod
    def _parse_xml_element(element):
        """XML element'ini parse et"""
        result = {}

        # Attributes
        if element.attrib:
            result['@attributes'] = dict(element.attrib)

        # Text content
        if element.text and element.text.strip():
            if len(element) == 0 and not element.attrib:
                return element.text.strip()
            result['#text'] = element.text.strip()

        # Boş eleman
        if len(element) == 0 and not result:
            return None

        # Child elements
        for child in element:
            # resolve_entities=False ile entity referansları ayrı node olarak kalır
            if not isinstance(child.tag, str):
                _logger.error(f"XML içinde çözümlenmeyen node: {child!r}")
                raise ParseError(child.text, f"XML entity desteklenmiyor: {child.text}")

            tag = etree.QName(child).localname
            child_data = XmlUtils._parse_xml_element(child)

            if tag in result:
                if not isinstance(result[tag], list):
                    result[tag] = [result[tag]]
                result[tag].append(child_data)
            else:
                result[tag] = child_data

        return result
