# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

import logging
from collections.abc import Mapping

from .errors import ShapeError
from .model import ParsingContext

logger = logging.getLogger(__name__)

JSON_LD_CONTEXT = "@context"


def is_string(value):
    return isinstance(value, str)

def is_collection(value):
    return isinstance(value, (list, tuple))

def is_dict(value):
    return isinstance(value, Mapping)


def resolve_entries(registry, entries, where):
    nodes = []
    for (alias, value) in entries.items():
        if is_string(value):
            nodes.extend(registry.resolve_aliased_simple(alias, value))
        elif is_dict(value):
            nodes.extend(registry.resolve_aliased_object(alias, value))
        else:
            raise ShapeError("@context value for {alias!r} in {where} is neither a dict nor a string: {value!r}".format(
                alias=alias, where=where, value=value))
    return nodes


def parse_jsonld_context(registry, document):
    """
    A reduced JSON-LD @context algorithm: builds the list of nodes able to
    interpret the rest of the document. Supports a single string, a dict of
    alias to name or inline definition, and an array mixing both. The first
    failing entry aborts the whole resolution.
    """
    if not is_dict(document) or JSON_LD_CONTEXT not in document:
        raise ShapeError("no {} in input".format(JSON_LD_CONTEXT))
    context = document[JSON_LD_CONTEXT]

    nodes = []
    if is_collection(context):
        for element in context:
            if is_dict(element):
                nodes.extend(resolve_entries(registry, element, "dict in array"))
            elif is_string(element):
                nodes.extend(registry.resolve_unaliased(element))
            else:
                raise ShapeError("@context array element neither dict nor string: {!r}".format(element))
    elif is_dict(context):
        nodes.extend(resolve_entries(registry, context, "dict"))
    elif is_string(context):
        # A lone string context stands alone; nothing else is accumulated.
        return registry.resolve_unaliased(context)
    else:
        raise ShapeError("single @context value is not a string: {!r}".format(context))
    return nodes


def apply_nodes(nodes, document, ctx):
    """
    Offer every top-level key of the document body to every node. Keys no
    node claims are reported and skipped. Nested values are not entered.
    """
    for (key, value) in document.items():
        if key == JSON_LD_CONTEXT:
            continue
        claimed = False
        for node in nodes:
            claimed = node.apply(key, value, ctx) or claimed
        if not claimed:
            logger.warning("No term in %s claims key %r", JSON_LD_CONTEXT, key)
    return ctx.result


def parse_vocabulary(registry, document, ctx=None):
    "Resolve the document's @context and apply its nodes to the document body."
    if ctx is None:
        ctx = ParsingContext()
    nodes = parse_jsonld_context(registry, document)
    logger.debug("Resolved %s into %d node(s)", JSON_LD_CONTEXT, len(nodes))
    return apply_nodes(nodes, document, ctx)
