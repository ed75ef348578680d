# -*- coding: utf-8 -*-

from ..constants import Gateway
from ..exceptions import ConfigurationError


def build_registry(classes):
    """
    Gateway -> instance tablosunu oluştur.

    Her gateway'i tam olarak bir sınıf sahiplenmeli,
    aksi halde ConfigurationError fırlatılır.

    Args:
        classes (iterable): `gateways` attribute'u olan sınıflar

    Returns:
        dict: {Gateway: instance}
    """
    registry = {}

    for klass in classes:
        instance = klass()

        for gateway in klass.gateways:
            if gateway in registry:
                raise ConfigurationError(
                    f"{gateway.value} birden fazla sınıfa kayıtlı: "
                    f"{type(registry[gateway]).__name__}, {klass.__name__}"
                )
            registry[gateway] = instance

    missing = [gateway.value for gateway in Gateway if gateway not in registry]
    if missing:
        raise ConfigurationError(f"Kaydı olmayan gateway'ler: {', '.join(missing)}")

    return registry


def to_gateway(gateway_type):
    """Gateway koduna karşılık gelen enum üyesi, bilinmiyorsa None"""
    try:
        return Gateway(gateway_type)
    except ValueError:
        return None
