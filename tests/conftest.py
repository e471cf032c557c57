import pytest

from vocabld.model import ParsingContext
from vocabld.ontologies.rfc import RFCOntology
from vocabld.registry import OntologyRegistry


@pytest.fixture
def registry():
    reg = OntologyRegistry()
    reg.add_ontology(RFCOntology(package="vocab"), "rfc")
    return reg


@pytest.fixture
def ctx():
    return ParsingContext()
