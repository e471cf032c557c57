# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

import logging
from threading import Lock

from rdflib import URIRef

from .errors import CollisionError, TypeMismatchError

logger = logging.getLogger(__name__)


def serialize_identity(value):
    "Pass-through serializer: the wire form of the value is the value."
    return value


def less_lexical(lhs, rhs):
    return lhs < rhs


class StringDeserializer:
    """
    Deserializer for string-valued terms. Accepts any str on the wire and
    rejects everything else with a TypeMismatchError naming the term.

    Instances compare by label so that two independently built values for the
    same term are equal.
    """
    def __init__(self, label):
        self.label = label

    def __call__(self, value):
        if isinstance(value, str):
            return value
        raise TypeMismatchError("{value!r} cannot be interpreted as a string for {label}".format(
            value=value, label=self.label))

    def __eq__(self, other):
        return isinstance(other, StringDeserializer) and self.label == other.label

    def __hash__(self):
        return hash(self.label)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.label)


class VocabularyValue:
    """
    One resolved term. `definition_type` names the semantic type of the
    term's values, `zero` is the literal of its zero value, and `serialize`,
    `deserialize` and `less` are the conversion contracts handed to the
    renderer.
    """
    def __init__(self, name, uri, definition_type, zero, is_nilable,
                 serialize, deserialize, less, package=""):
        self.name = name
        self.uri = URIRef(uri)
        self.definition_type = definition_type
        self.zero = zero
        self.is_nilable = is_nilable
        self.serialize = serialize
        self.deserialize = deserialize
        self.less = less
        self.package = package

    def to_json(self):
        return {"name": self.name,
                "uri": str(self.uri),
                "type": str(self.definition_type),
                "zero": self.zero,
                "nilable": self.is_nilable,
                "package": self.package}

    def __eq__(self, other):
        if not isinstance(other, VocabularyValue):
            return NotImplemented
        return self.to_json() == other.to_json() and \
            (self.serialize, self.deserialize, self.less) == (other.serialize, other.deserialize, other.less)

    def __hash__(self):
        return hash((self.name, self.uri))

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, self.uri)


class ReferenceEntry:
    """
    The bucket of resolved terms for one specification URI. Each slot is
    write-once: set_value() inserts if the slot is empty, is a no-op if it
    already holds an equal value, and raises CollisionError otherwise.
    """
    def __init__(self, spec):
        self.spec = spec
        self.values = {}
        self._lock = Lock()

    def get(self, name):
        return self.values.get(name)

    def has(self, name):
        value = self.values.get(name)
        return value is not None and bool(value.name)

    def set_value(self, name, value):
        with self._lock:
            existing = self.values.get(name)
            if existing is None:
                self.values[name] = value
                logger.debug("Committed %s into %s", name, self.spec)
                return value
            if existing != value:
                raise CollisionError("Term {name} in {spec} is already defined as {existing!r}, cannot redefine it as {value!r}".format(
                    name=name, spec=self.spec, existing=existing, value=value))
            return existing

    def to_json(self):
        return {name: value.to_json() for (name, value) in sorted(self.values.items())}

    def __eq__(self, other):
        if not isinstance(other, ReferenceEntry):
            return NotImplemented
        return self.spec == other.spec and self.values == other.values

    def __repr__(self):
        return "%s(%s, %s)" % (self.__class__.__name__, self.spec, sorted(self.values))


class ParsedVocabulary:
    "Mapping of specification URI to the ReferenceEntry holding its terms."
    def __init__(self):
        self.references = {}
        self._lock = Lock()

    def get_reference(self, spec):
        "Fetch or create the ReferenceEntry for spec."
        with self._lock:
            if spec not in self.references:
                self.references[spec] = ReferenceEntry(spec)
            return self.references[spec]

    def get_value(self, spec, name):
        reference = self.references.get(spec)
        return reference.get(name) if reference else None

    def to_json(self):
        return {spec: reference.to_json() for (spec, reference) in sorted(self.references.items())}

    def __eq__(self, other):
        if not isinstance(other, ParsedVocabulary):
            return NotImplemented
        return self.references == other.references

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, sorted(self.references))


class ParsingContext:
    "Holds the shared ParsedVocabulary for one parse session."
    def __init__(self, result=None):
        self.result = result if result is not None else ParsedVocabulary()
