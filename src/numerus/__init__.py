# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from .counttypes import CountType
from .rules import DEFAULT_RULES, RuleSet, resolve_rules
from .wordcount import count, count_markdown, format_count

__all__ = ["CountType", "DEFAULT_RULES", "RuleSet", "count", "count_markdown", "format_count", "resolve_rules"]
