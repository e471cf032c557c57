# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

from . import ontologies
from .errors import (CollisionError, NotFoundError, ShapeError, TypeMismatchError,
                     UnknownTermError, UnsupportedOperationError, VocabularyError)
from .model import ParsedVocabulary, ParsingContext, ReferenceEntry, VocabularyValue
from .nodes import AliasedDelegate, OntologyNode
from .ontology import Ontology
from .parse import apply_nodes, parse_jsonld_context, parse_vocabulary
from .registry import OntologyRegistry

__all__ = [
    "AliasedDelegate",
    "CollisionError",
    "NotFoundError",
    "Ontology",
    "OntologyNode",
    "OntologyRegistry",
    "ParsedVocabulary",
    "ParsingContext",
    "ReferenceEntry",
    "ShapeError",
    "TypeMismatchError",
    "UnknownTermError",
    "UnsupportedOperationError",
    "VocabularyError",
    "VocabularyValue",
    "apply_nodes",
    "parse_jsonld_context",
    "parse_vocabulary",
]
