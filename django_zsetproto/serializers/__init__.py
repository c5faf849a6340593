from django_zsetproto.serializers.base import BaseSerializer
from django_zsetproto.serializers.string import StringSerializer

__all__ = [
    "BaseSerializer",
    "StringSerializer",
]
