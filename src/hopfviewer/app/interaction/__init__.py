"""
Auto-import all input adapter modules to ensure registration side-effects run.

After importing this package, `registry.list_keys()` and `registry.create_adapter()`
will know about all available adapters.
"""
from __future__ import annotations

import importlib
import pkgutil

from hopfviewer.app import interaction as _adapters_pkg

for _module in pkgutil.iter_modules(_adapters_pkg.__path__, _adapters_pkg.__name__ + "."):
    importlib.import_module(_module.name)
