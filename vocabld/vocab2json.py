# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

import argparse
import json
import logging
import sys

from .errors import VocabularyError
from .parse import parse_vocabulary
from .registry import OntologyRegistry


def load_document(path):
    with open(path) as f:
        return json.loads(f.read())


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Resolve a JSON-LD vocabulary definition and print its terms as JSON')
    parser.add_argument('-f', '--file', dest='file', help='JSON-LD vocabulary input file', required=True)
    parser.add_argument('-p', '--package', dest='package', required=False, default="")
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true')
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    registry = OntologyRegistry.from_plugins(package=args.package)
    try:
        vocabulary = parse_vocabulary(registry, load_document(args.file))
    except VocabularyError as e:
        print("Error: %s" % e, file=sys.stderr)
        return 1
    print(json.dumps(vocabulary.to_json(), indent=4))
    return 0


if __name__ == "__main__":
    sys.exit(main())
