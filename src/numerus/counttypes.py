# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

import enum
import logging
import typing

logger = logging.getLogger(__name__)


class CountType(str, enum.Enum):
    WORDS = "words"
    CHARS_EXCLUDING_SPACES = "charsExcludingSpaces"
    CHARS_INCLUDING_SPACES = "charsIncludingSpaces"

    @property
    def is_characters(self):
        return self is not CountType.WORDS

    @classmethod
    def coerce(cls, value: typing.Any) -> "CountType":
        """Map any requested count type onto one of the three variants.

        Only the exact names "charsExcludingSpaces" and "charsIncludingSpaces" select a character count.
        Anything else, including other spellings, None, and non-string values, counts words.
        """
        if isinstance(value, CountType):
            return value
        if isinstance(value, str) and value in _BY_NAME:
            return _BY_NAME[value]
        if value != cls.WORDS.value:
            logger.debug("Unrecognized count type %r; counting words", value)
        return cls.WORDS


_BY_NAME = {
    "words": CountType.WORDS,
    "charsExcludingSpaces": CountType.CHARS_EXCLUDING_SPACES,
    "charsIncludingSpaces": CountType.CHARS_INCLUDING_SPACES,
}
