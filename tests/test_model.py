import threading

import pytest

from vocabld.errors import CollisionError, TypeMismatchError
from vocabld.model import (ParsedVocabulary, ParsingContext, StringDeserializer, VocabularyValue,
                           less_lexical, serialize_identity)
from vocabld.ontologies.rfc import BCP47, BCP47_SPEC, RFC_SPEC, string_value


def test_get_reference_creates_once():
    vocab = ParsedVocabulary()
    ref = vocab.get_reference(RFC_SPEC)
    assert vocab.get_reference(RFC_SPEC) is ref
    assert ref.values == {}


def test_set_value_same_value_twice_is_noop():
    ref = ParsedVocabulary().get_reference(RFC_SPEC)
    ref.set_value(BCP47_SPEC, string_value(BCP47_SPEC, "bcp47 languagetag", ""))
    ref.set_value(BCP47_SPEC, string_value(BCP47_SPEC, "bcp47 languagetag", ""))
    assert list(ref.values) == [BCP47_SPEC]


def test_set_value_different_value_collides():
    ref = ParsedVocabulary().get_reference(RFC_SPEC)
    first = string_value(BCP47_SPEC, "bcp47 languagetag", "")
    ref.set_value(BCP47_SPEC, first)
    with pytest.raises(CollisionError, match=BCP47_SPEC):
        ref.set_value(BCP47_SPEC, string_value(BCP47_SPEC, "bcp47 languagetag", "other"))
    assert ref.get(BCP47_SPEC) is first


def test_string_deserializer():
    deserialize = StringDeserializer("bcp47 languagetag")
    for x in ["", "en-US", "zh-Hant-TW", "ünïcode"]:
        assert deserialize(serialize_identity(x)) == x
    for bad in [42, None, 1.5, ["en"], {"@value": "en"}]:
        with pytest.raises(TypeMismatchError, match="bcp47 languagetag"):
            deserialize(bad)


def test_string_deserializers_compare_by_label():
    assert StringDeserializer("rel") == StringDeserializer("rel")
    assert StringDeserializer("rel") != StringDeserializer("MIME media type")


def test_less_lexical():
    assert less_lexical("a", "b")
    assert not less_lexical("b", "a")
    assert not less_lexical("a", "a")


def test_value_to_json():
    value = VocabularyValue(name="n", uri="http://example.com/n", definition_type="string", zero='""',
                            is_nilable=False, serialize=serialize_identity,
                            deserialize=StringDeserializer("n"), less=less_lexical)
    assert value.to_json() == {"name": "n", "uri": "http://example.com/n", "type": "string",
                               "zero": '""', "nilable": False, "package": ""}


def test_concurrent_first_writers_agree():
    ctx = ParsingContext()
    barrier = threading.Barrier(8)
    errors = []

    def worker():
        barrier.wait()
        try:
            BCP47().apply("bcp47", "en", ctx)
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []
    assert list(ctx.result.get_reference(RFC_SPEC).values) == [BCP47_SPEC]
