# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

from abc import ABC, abstractmethod


class Ontology(ABC):
    """
    A source of vocabulary terms, implemented once per external standard.

    Providers are stateless apart from `package`, the output-package tag
    passed through to the values their nodes build. They never touch a
    ParsedVocabulary themselves; they only hand out nodes that will.
    """
    def __init__(self, package=""):
        self.package = package

    @abstractmethod
    def spec_uri(self) -> str:
        """
        Concrete subclasses should return the canonical specification URI
        their terms live under, or "" if they have no fixed URI.
        """

    def load(self):
        "All terms, unaliased."
        return self.load_as_alias("")

    @abstractmethod
    def load_as_alias(self, alias):
        """
        Concrete subclasses should return nodes for all of their terms,
        namespaced under alias.
        """

    @abstractmethod
    def load_specific_as_alias(self, alias, name):
        """
        Concrete subclasses should return the node for the one term whose
        canonical name is `name`, published under alias, or raise
        NotFoundError.
        """

    def load_element(self, name, payload):
        """
        Interpret an inline object-shaped term definition. Returning no nodes
        means the provider does not recognize the shape.
        """
        return []

    @abstractmethod
    def get_by_name(self, name):
        """
        Concrete subclasses should strip their own spec URI from name and
        return the matching term node, or raise NotFoundError.
        """

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, self.spec_uri())
