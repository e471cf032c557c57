import pytest

from vocabld.errors import CollisionError, NotFoundError, ShapeError, UnknownTermError
from vocabld.nodes import AliasedDelegate
from vocabld.ontologies.rfc import BCP47, RFC_SPEC, MIME, Rel, RFCOntology
from vocabld.ontology import Ontology
from vocabld.registry import OntologyRegistry


class KeywordOntology(Ontology):
    "Recognizes inline definitions typed as xsd:string; has no spec URI."
    def spec_uri(self):
        return ""

    def load_as_alias(self, alias):
        return []

    def load_specific_as_alias(self, alias, name):
        raise NotFoundError(name)

    def load_element(self, name, payload):
        if payload.get("@type") == "xsd:string":
            return [AliasedDelegate(spec="", alias="", name=name, delegate=BCP47())]
        return []

    def get_by_name(self, name):
        raise NotFoundError(name)


def test_resolve_by_spec_and_short_name(registry):
    assert len(registry.resolve_unaliased(RFC_SPEC)) == 3
    assert len(registry.resolve_unaliased("rfc")) == 3
    assert [n.alias for n in registry.resolve_aliased_simple("ietf", "rfc")] == ["ietf"] * 3


def test_resolve_single_term(registry):
    [node] = registry.resolve_unaliased(RFC_SPEC + "rfc5988")
    assert isinstance(node.delegate, Rel)
    [node] = registry.resolve_aliased_simple("mt", "rfc:rfc2045")
    assert isinstance(node.delegate, MIME)
    assert node.keys() == ["mt"]


def test_resolve_unknown_name(registry):
    with pytest.raises(NotFoundError, match="https://example.com/ns"):
        registry.resolve_unaliased("https://example.com/ns")
    with pytest.raises(NotFoundError, match="nope:bcp47"):
        registry.resolve_aliased_simple("x", "nope:bcp47")
    with pytest.raises(NotFoundError, match="rfc1"):
        registry.resolve_unaliased(RFC_SPEC + "rfc1")


def test_duplicate_registration_collides(registry):
    registry.add_ontology(registry.ontologies["rfc"], "ietf")
    with pytest.raises(CollisionError, match="already registered"):
        registry.add_ontology(RFCOntology(), "other")
    assert "other" not in registry.ontologies


def test_resolve_aliased_object(registry):
    [node] = registry.resolve_aliased_object("lang", {"@id": RFC_SPEC + "bcp47", "@type": "@id"})
    assert node.matches("lang")
    assert isinstance(node.delegate, BCP47)


def test_resolve_aliased_object_falls_through_providers(registry):
    registry.add_ontology(KeywordOntology())
    [node] = registry.resolve_aliased_object("title", {"@id": "http://purl.org/dc/terms/title",
                                                       "@type": "xsd:string"})
    assert node.matches("title")


def test_resolve_aliased_object_unknown(registry):
    with pytest.raises(UnknownTermError, match="summary"):
        registry.resolve_aliased_object("summary", {"@id": "https://www.w3.org/ns/activitystreams#summary"})


@pytest.mark.parametrize("definition", [
    {},
    {"@id": 5},
    {"@id": ["https://tools.ietf.org/html/bcp47"]},
    {"@id": "https://tools.ietf.org/html/bcp47", "@type": ["@id"]},
])
def test_resolve_aliased_object_malformed(registry, definition):
    with pytest.raises(ShapeError, match="lang"):
        registry.resolve_aliased_object("lang", definition)


def test_get_node(registry):
    assert isinstance(registry.get_node("rfc:bcp47"), BCP47)
    assert isinstance(registry.get_node(RFC_SPEC + "rfc2045"), MIME)
    with pytest.raises(NotFoundError, match="names an ontology"):
        registry.get_node("rfc")


def test_from_plugins():
    registry = OntologyRegistry.from_plugins(package="generated")
    ontology = registry.ontologies["rfc"]
    assert isinstance(ontology, RFCOntology)
    assert registry.ontologies[RFC_SPEC] is ontology
    assert ontology.package == "generated"
    assert len(registry.resolve_unaliased("rfc")) == 3
