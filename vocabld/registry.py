# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

import logging

from rdflib.plugin import plugins

from .errors import CollisionError, NotFoundError, ShapeError, UnknownTermError
from .ontology import Ontology

logger = logging.getLogger(__name__)

ID = "@id"
TYPE = "@type"


class OntologyRegistry:
    """
    Directory of Ontology providers for one parse session, keyed by spec URI
    and by any short names given at registration. A name used in a context
    may be:

      - a registered key, selecting every term of that ontology;
      - a spec URI followed by a term name, selecting that one term;
      - `short:term`, selecting one term of the ontology registered as short.

    Resolution only selects nodes; it never writes to a ParsedVocabulary.
    """
    def __init__(self):
        self.ontologies = {}
        self.providers = []

    @classmethod
    def from_plugins(cls, package=""):
        """
        Build a registry holding one instance of every Ontology registered
        as an rdflib plugin, keyed by plugin name and spec URI.
        """
        registry = cls()
        for plugin in plugins(None, Ontology):
            registry.add_ontology(plugin.getClass()(package=package), plugin.name)
        return registry

    def add_ontology(self, ontology, *names):
        keys = list(names)
        if ontology.spec_uri():
            keys.insert(0, ontology.spec_uri())
        for key in keys:
            existing = self.ontologies.get(key)
            if existing is not None and existing is not ontology:
                raise CollisionError("Ontology {existing!r} is already registered for {key!r}".format(
                    existing=existing, key=key))
        for key in keys:
            self.ontologies[key] = ontology
        if ontology not in self.providers:
            self.providers.append(ontology)
        logger.debug("Registered %r as %s", ontology, keys)
        return ontology

    def _lookup(self, name):
        "Returns (ontology, term) where term is None when name selects the whole ontology."
        if name in self.ontologies:
            return (self.ontologies[name], None)

        prefixed = [o for o in self.providers
                    if o.spec_uri() and name.startswith(o.spec_uri()) and len(name) > len(o.spec_uri())]
        if prefixed:
            ontology = max(prefixed, key=lambda o: len(o.spec_uri()))
            return (ontology, name[len(ontology.spec_uri()):])

        short, sep, term = name.partition(":")
        if sep and term and short in self.ontologies:
            return (self.ontologies[short], term)

        raise NotFoundError("No ontology is registered for {!r}".format(name))

    def resolve_unaliased(self, name):
        ontology, term = self._lookup(name)
        if term is None:
            nodes = ontology.load()
        else:
            nodes = ontology.load_specific_as_alias("", term)
        logger.debug("Resolved %s to %d node(s)", name, len(nodes))
        return list(nodes)

    def resolve_aliased_simple(self, alias, name):
        ontology, term = self._lookup(name)
        if term is None:
            nodes = ontology.load_as_alias(alias)
        else:
            nodes = ontology.load_specific_as_alias(alias, term)
        logger.debug("Resolved %s as %s to %d node(s)", name, alias, len(nodes))
        return list(nodes)

    def resolve_aliased_object(self, alias, definition):
        """
        Resolve an inline term definition such as {"@id": ..., "@type": ...}.
        The ontology whose spec URI prefixes the @id is asked first, then the
        others in registration order; the first to return nodes wins.
        """
        uri = definition.get(ID)
        if not isinstance(uri, str):
            raise ShapeError("Definition of {alias!r} needs a string {id}, found {uri!r}".format(
                alias=alias, id=ID, uri=uri))
        if TYPE in definition and not isinstance(definition[TYPE], str):
            raise ShapeError("Definition of {alias!r} has a non-string {type}: {value!r}".format(
                alias=alias, type=TYPE, value=definition[TYPE]))

        owners = [o for o in self.providers if o.spec_uri() and uri.startswith(o.spec_uri())]
        for ontology in owners + [o for o in self.providers if o not in owners]:
            nodes = ontology.load_element(alias, definition)
            if nodes:
                logger.debug("Resolved %s as %s to %d node(s) from %r", uri, alias, len(nodes), ontology)
                return list(nodes)
        raise UnknownTermError("No ontology recognizes the definition of {alias!r} ({uri})".format(
            alias=alias, uri=uri))

    def get_node(self, name):
        ontology, term = self._lookup(name)
        if term is None:
            raise NotFoundError("{!r} names an ontology, not a term".format(name))
        return ontology.get_by_name(term)
