"""Build-time generator for a shared atomic metrics registry."""

from .collector import NameCollector, canonical_names
from .config import ConfigError, GeneratorConfig, load_config
from .emitter import ArtifactWriteError, RegistryEmitter
from .fileset import FileSetResolver
from .formatter import Formatter, FormatterError
from .models import InvocationSite, OperationKind
from .orchestrator import Orchestrator, generate_from_names, generate_from_scan
from .scanner import InvocationScanner

__all__ = [
    "ArtifactWriteError",
    "ConfigError",
    "FileSetResolver",
    "Formatter",
    "FormatterError",
    "GeneratorConfig",
    "InvocationScanner",
    "InvocationSite",
    "NameCollector",
    "OperationKind",
    "Orchestrator",
    "RegistryEmitter",
    "canonical_names",
    "generate_from_names",
    "generate_from_scan",
    "load_config",
]
