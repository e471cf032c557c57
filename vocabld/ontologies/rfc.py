# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

"""
Ontology values defined in RFCs, BCPs and other miscellaneous standards.
Every term here is a plain string on the wire.
"""

from rdflib import Namespace, XSD

from ..errors import NotFoundError
from ..model import StringDeserializer, VocabularyValue, less_lexical, serialize_identity
from ..nodes import AliasedDelegate, OntologyNode
from ..ontology import Ontology

RFC_SPEC = "https://tools.ietf.org/html/"
BCP47_SPEC = "bcp47"
MIME_SPEC = "rfc2045"  # See also: rfc2046 and rfc6838
REL_SPEC = "rfc5988"

RFC = Namespace(RFC_SPEC)


def string_value(name, label, package):
    return VocabularyValue(name=name,
                           uri=RFC[name],
                           definition_type=XSD.string,
                           zero='""',
                           is_nilable=False,
                           serialize=serialize_identity,
                           deserialize=StringDeserializer(label),
                           less=less_lexical,
                           package=package)


def apply_string_term(name, label, package, ctx):
    reference = ctx.result.get_reference(RFC_SPEC)
    if not reference.has(name):
        reference.set_value(name, string_value(name, label, package))
    return True


class BCP47(OntologyNode):
    "Language tag (BCP 47)."
    description = "bcp47 languagetag"

    def __init__(self, package=""):
        self.package = package

    def apply(self, key, value, ctx):
        return apply_string_term(BCP47_SPEC, self.description, self.package, ctx)


class MIME(OntologyNode):
    "MIME media type (RFC 2045)."
    description = "MIME media type"

    def __init__(self, package=""):
        self.package = package

    def apply(self, key, value, ctx):
        return apply_string_term(MIME_SPEC, self.description, self.package, ctx)


class Rel(OntologyNode):
    "Link relation type (RFC 5988)."
    description = "rel"

    def __init__(self, package=""):
        self.package = package

    def apply(self, key, value, ctx):
        return apply_string_term(REL_SPEC, self.description, self.package, ctx)


class RFCOntology(Ontology):
    terms = {BCP47_SPEC: BCP47,
             MIME_SPEC: MIME,
             REL_SPEC: Rel}

    def spec_uri(self):
        return RFC_SPEC

    def load_as_alias(self, alias):
        return [AliasedDelegate(spec=RFC_SPEC, alias=alias, name=name, delegate=term(self.package))
                for (name, term) in self.terms.items()]

    def load_specific_as_alias(self, alias, name):
        if name not in self.terms:
            raise NotFoundError("rfc ontology cannot find {name!r} to alias to {alias!r}".format(
                name=name, alias=alias))
        delegate = self.terms[name](self.package)
        if alias:
            return [AliasedDelegate(spec="", alias="", name=alias, delegate=delegate)]
        return [AliasedDelegate(spec=RFC_SPEC, alias="", name=name, delegate=delegate)]

    def load_element(self, name, payload):
        uri = payload.get("@id")
        if isinstance(uri, str) and uri.startswith(RFC_SPEC) and uri[len(RFC_SPEC):] in self.terms:
            return self.load_specific_as_alias(name, uri[len(RFC_SPEC):])
        return []

    def get_by_name(self, name):
        if name.startswith(RFC_SPEC):
            name = name[len(RFC_SPEC):]
        if name not in self.terms:
            raise NotFoundError("rfc ontology could not find node for name {}".format(name))
        return self.terms[name](self.package)
