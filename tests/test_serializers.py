import pickle

import pytest
from django.core.exceptions import ImproperlyConfigured

from django_zsetproto.commands import ZAdd, ZRange, ZRangeWithScores
from django_zsetproto.compat import create_serializer, get_default_serializer, is_serializer_instance
from django_zsetproto.exceptions import SerializerError
from django_zsetproto.serializers.json import JSONSerializer
from django_zsetproto.serializers.msgpack import MessagePackSerializer
from django_zsetproto.serializers.pickle import PickleSerializer
from django_zsetproto.serializers.string import StringSerializer


class TestStringSerializer:
    def test_text_passthrough(self):
        serializer = StringSerializer()
        assert serializer.dumps("member") == "member"
        assert serializer.dumps(b"\x00raw") == b"\x00raw"
        assert serializer.dumps(memoryview(b"mv")) == b"mv"

    def test_numbers(self):
        serializer = StringSerializer()
        assert serializer.dumps(42) == "42"
        assert serializer.dumps(1.5) == "1.5"

    @pytest.mark.parametrize("value", [True, None, object(), ["a"]])
    def test_unsupported_types(self, value):
        with pytest.raises(SerializerError):
            StringSerializer().dumps(value)

    def test_loads(self):
        serializer = StringSerializer()
        assert serializer.loads(b"caf\xc3\xa9") == "café"
        assert serializer.loads("already text") == "already text"

    def test_binary_member_reads_back_as_bytes(self):
        serializer = StringSerializer()
        member = b"\xff\x00bin"
        assert serializer.loads(serializer.dumps(member)) == member

    def test_binary_member_in_range_reply(self):
        member = b"\xff\x00bin"
        assert ZAdd("k", 1.0, member).args() == ["ZADD", "k", "1.0", member]
        assert ZRange("k").parse_response([member, b"text"]) == [member, "text"]
        assert ZRangeWithScores("k").parse_response([member, b"1"]) == [(member, 1.0)]

    def test_numbers_read_back_as_text(self):
        serializer = StringSerializer()
        assert serializer.loads(serializer.dumps(42).encode()) == "42"

    def test_custom_encoding(self):
        assert StringSerializer(encoding="latin-1").loads(b"caf\xe9") == "café"


class TestJSONSerializer:
    def test_basic_roundtrip(self):
        serializer = JSONSerializer()
        data = {"key": "value", "number": 42, "nested": {"list": [1, 2, 3]}}
        assert serializer.loads(serializer.dumps(data)) == data

    def test_compact_output(self):
        assert JSONSerializer().dumps({"a": [1, 2]}) == b'{"a":[1,2]}'

    def test_invalid_data(self):
        with pytest.raises(SerializerError):
            JSONSerializer().loads(b"not json")


class TestPickleSerializer:
    def test_protocol_not_explicitly_specified(self):
        serializer = PickleSerializer()
        assert serializer.protocol == pickle.DEFAULT_PROTOCOL

    def test_protocol_too_high(self):
        with pytest.raises(
            ImproperlyConfigured,
            match=f"protocol can't be higher than pickle.HIGHEST_PROTOCOL: {pickle.HIGHEST_PROTOCOL}",
        ):
            PickleSerializer(protocol=pickle.HIGHEST_PROTOCOL + 1)

    def test_protocol_explicit(self):
        serializer = PickleSerializer(protocol=4)
        assert serializer.protocol == 4
        assert serializer.loads(serializer.dumps({"a": (1, 2)})) == {"a": (1, 2)}

    def test_invalid_data(self):
        with pytest.raises(SerializerError):
            PickleSerializer().loads(b"garbage")


class TestMessagePackSerializer:
    def test_basic_roundtrip(self):
        serializer = MessagePackSerializer()
        data = {"key": "value", "number": 42, "nested": {"list": [1, 2, 3]}}
        encoded = serializer.dumps(data)
        assert isinstance(encoded, bytes)
        assert serializer.loads(encoded) == data

    def test_unsupported_type(self):
        with pytest.raises(SerializerError):
            MessagePackSerializer().dumps(object())


class TestCreateSerializer:
    def test_none_is_string_serializer(self):
        assert isinstance(create_serializer(None), StringSerializer)

    def test_dotted_path(self):
        serializer = create_serializer("django_zsetproto.serializers.json.JSONSerializer")
        assert isinstance(serializer, JSONSerializer)

    def test_class_with_kwargs(self):
        serializer = create_serializer(PickleSerializer, protocol=3)
        assert serializer.protocol == 3

    def test_instance_returned_unchanged(self):
        instance = MessagePackSerializer()
        assert create_serializer(instance) is instance

    def test_is_serializer_instance(self):
        assert is_serializer_instance(JSONSerializer())
        assert not is_serializer_instance(JSONSerializer)
        assert not is_serializer_instance("path")


class TestDefaultSerializer:
    def test_builtin_default(self):
        assert isinstance(get_default_serializer(), StringSerializer)

    def test_setting_overrides_default(self, settings):
        settings.ZSETPROTO_SERIALIZER = "django_zsetproto.serializers.json.JSONSerializer"
        assert isinstance(get_default_serializer(), JSONSerializer)

    def test_commands_render_with_configured_serializer(self, settings):
        from django_zsetproto.commands import ZScore

        settings.ZSETPROTO_SERIALIZER = "django_zsetproto.serializers.json.JSONSerializer"
        assert ZScore("k", {"id": 7}).args() == ["ZSCORE", "k", b'{"id":7}']

    def test_default_instance_is_reused(self):
        assert get_default_serializer() is get_default_serializer()

    def test_new_setting_value_builds_new_instance(self, settings):
        before = get_default_serializer()
        settings.ZSETPROTO_SERIALIZER = "django_zsetproto.serializers.msgpack.MessagePackSerializer"
        after = get_default_serializer()
        assert after is not before
        assert isinstance(after, MessagePackSerializer)
        assert get_default_serializer() is after

    def test_instance_setting_used_as_is(self, settings):
        instance = JSONSerializer()
        settings.ZSETPROTO_SERIALIZER = instance
        assert get_default_serializer() is instance
