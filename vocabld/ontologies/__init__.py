# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

from rdflib.plugin import register

from ..ontology import Ontology


register(
    "rfc",
    Ontology,
    "vocabld.ontologies.rfc",
    "RFCOntology",
)
