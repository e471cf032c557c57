# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks
# SPDX-License-Identifier: AGPL-3.0

class VocabularyError(Exception):
    pass

class ShapeError(VocabularyError, ValueError):
    pass

class NotFoundError(VocabularyError, LookupError):
    pass

class UnknownTermError(NotFoundError):
    pass

class UnsupportedOperationError(VocabularyError, TypeError):
    pass

class TypeMismatchError(VocabularyError, TypeError):
    pass

class CollisionError(VocabularyError, ValueError):
    pass
