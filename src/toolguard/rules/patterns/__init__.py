# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Built-in indicator pattern sets.

Importing this package registers every set with :class:`PatternRegistry`;
base patterns are imported first so they lead every resolved set.
"""

import toolguard.rules.patterns.base
import toolguard.rules.patterns.config
import toolguard.rules.patterns.hook
import toolguard.rules.patterns.mcp
import toolguard.rules.patterns.skill  # noqa: F401
