"""
Progressive filtering: cable type -> system -> cores -> installation method.

Each step takes the previous step's resolved value and returns the choices
that exist in the catalog. An empty result is a dead end the caller resolves
by revising an earlier choice, it is not an error.
"""
from typing import Iterable, List, Optional, Tuple

from core.converters import parse_system
from standards.catalog import Catalog, default_catalog

# Preselected method per cable construction
DEFAULT_METHOD_SINGLE_CORE = "B1"
DEFAULT_METHOD_MULTI_CORE = "B2"


def cores_for_system(system, available_cores: Iterable[str], catalog: Optional[Catalog] = None) -> List[Tuple[str, str]]:
    catalog = catalog or default_catalog()
    system = parse_system(system)
    available = set(available_cores)
    return [
        (core.code, core.name)
        for core in catalog.core_configurations()
        if core.code in available and core.applies_to(system)
    ]


def install_methods_for_cores(cores: str, catalog: Optional[Catalog] = None) -> List[Tuple[str, str]]:
    catalog = catalog or default_catalog()
    return [(m.code, m.name) for m in catalog.install_methods() if m.accepts(cores)]


def default_install_method(cores: str, catalog: Optional[Catalog] = None) -> Optional[str]:
    """B1 for single-core, B2 for multi-core; None if that method is not offered."""
    catalog = catalog or default_catalog()
    codes = [code for code, _ in install_methods_for_cores(cores, catalog)]
    if not codes:
        return None
    single = catalog.core_configuration(cores).is_single_core
    preferred = DEFAULT_METHOD_SINGLE_CORE if single else DEFAULT_METHOD_MULTI_CORE
    return preferred if preferred in codes else None
