"""Asset library.

Compiles the client assets of the application into served bundles and keeps
them in an on-disk cache between process starts.

Public Interface:
    Modules:
    - pipeline: Build orchestration (load / build entry points)
    - compilers: Per-asset-family compilers
    - encoding: Validators, MIME types and compressed encodings
    - cache: Cache persistence and freshness detection
    - transforms: Transform ports and default adapters
    - config: Configuration loading
    - storage: Storage locations
"""

__version__ = "0.1.0"

from .models import CompiledCache
from .models import CompiledEntry
from .pipeline import AssetPipeline
from .pipeline import BuildState

__all__ = [
    "__version__",
    "AssetPipeline",
    "BuildState",
    "CompiledCache",
    "CompiledEntry",
]
