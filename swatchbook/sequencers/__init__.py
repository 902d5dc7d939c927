"""Ordering strategies, one module per `Sequencer`.

Imported explicitly so frozen builds, where pkgutil cannot list this package,
still register every strategy (see swatchbook.registry).
"""

import swatchbook.sequencers.as_given as _as_given  # noqa: F401
import swatchbook.sequencers.nearest as _nearest  # noqa: F401
import swatchbook.sequencers.two_opt as _two_opt  # noqa: F401
