# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

from abc import ABC, abstractmethod

from .errors import UnsupportedOperationError


class OntologyNode(ABC):
    """
    A unit of interpretation bound to one ontology term. The document-body
    walker offers every key of the document to every active node through
    apply(); each node decides for itself whether the key is one it owns.

    enter() and exit() mark structural nesting for terms holding compound
    values. Scalar terms keep the defaults, which refuse.
    """
    description = "term"

    def enter(self, key, ctx):
        raise UnsupportedOperationError("{} cannot be entered (key {!r})".format(self.description, key))

    def exit(self, key, ctx):
        raise UnsupportedOperationError("{} cannot be exited (key {!r})".format(self.description, key))

    @abstractmethod
    def apply(self, key, value, ctx) -> bool:
        """
        Concrete subclasses interpret the key/value pair against
        ctx.result and return whether they claimed the key.
        """


def joined_alias(alias, name):
    return "{}:{}".format(alias, name) if alias else name


class AliasedDelegate(OntologyNode):
    """
    Publishes a term node under a document-local name. The delegate only
    sees keys equal to `alias:name` (or `name` when unaliased) or to the
    full `spec + name` URI.
    """
    def __init__(self, spec, alias, name, delegate):
        self.spec = spec
        self.alias = alias
        self.name = name
        self.delegate = delegate

    @property
    def description(self):
        return self.delegate.description

    def keys(self):
        keys = [joined_alias(self.alias, self.name)]
        if self.spec:
            keys.append(self.spec + self.name)
        return keys

    def matches(self, key):
        return key in self.keys()

    def enter(self, key, ctx):
        if not self.matches(key):
            return False
        return self.delegate.enter(key, ctx)

    def exit(self, key, ctx):
        if not self.matches(key):
            return False
        return self.delegate.exit(key, ctx)

    def apply(self, key, value, ctx):
        if not self.matches(key):
            return False
        return self.delegate.apply(key, value, ctx)

    def __eq__(self, other):
        if not isinstance(other, AliasedDelegate):
            return NotImplemented
        return (self.spec, self.alias, self.name, type(self.delegate)) == \
            (other.spec, other.alias, other.name, type(other.delegate))

    def __hash__(self):
        return hash((self.spec, self.alias, self.name))

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, ", ".join(self.keys()))
