"""
Read-only view over the KEC reference tables.

A Catalog is built once and never mutated: every mapping it exposes is a
MappingProxyType and every sequence is a tuple. Tests build catalogs from
substitute tables through the constructor keywords.
"""
import logging
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from core.components import AmpacityRating, CableType, CoreConfiguration, InstallationMethod
from core.converters import circle_area, format_size
from core.errors import NotFound, OutOfRange
from core.models import GroundWire, InsulationClass
from standards import kec_tables

logger = logging.getLogger(__name__)


class Catalog:

    def __init__(
        self,
        cable_types=None,
        core_configurations=None,
        install_methods=None,
        ampacity_table: Optional[Dict] = None,
        grouping_factors: Optional[Dict[int, float]] = None,
        outer_diameters: Optional[Dict] = None,
        diameter_scaling: Optional[Dict] = None,
        reduced_ground_size: Optional[Dict] = None,
        conduit_inner_diameters: Optional[List[Tuple[str, float]]] = None,
    ):
        cores = core_configurations if core_configurations is not None else kec_tables.CORE_CONFIGURATIONS
        self._cores = MappingProxyType({
            code: CoreConfiguration(code=code, name=name, cores=physical, conductor_count=loaded,
                                    systems=frozenset(systems))
            for code, name, physical, loaded, systems in cores
        })

        types = cable_types if cable_types is not None else kec_tables.CABLE_TYPES
        self._cable_types = MappingProxyType({
            code: CableType(
                code=code, name=name, description=desc, insulation=insulation,
                max_temperature=max_temp, sizes=tuple(float(s) for s in sizes),
                core_configurations=tuple(c for c in self._cores if c in core_codes),
            )
            for code, name, desc, insulation, max_temp, sizes, core_codes in types
        })

        methods = install_methods if install_methods is not None else kec_tables.INSTALL_METHODS
        self._methods = MappingProxyType({
            code: InstallationMethod(code=code, name=name, description=desc, cores=frozenset(core_codes))
            for code, name, desc, core_codes in methods
        })

        table = ampacity_table if ampacity_table is not None else kec_tables.build_ampacity_table()
        self._ampacity = MappingProxyType({
            (InsulationClass(ins), method, float(size)): AmpacityRating(*cell)
            for (ins, method, size), cell in table.items()
        })

        self._grouping = MappingProxyType(dict(sorted(
            (grouping_factors if grouping_factors is not None else kec_tables.GROUPING_FACTORS).items()
        )))

        diameters = outer_diameters if outer_diameters is not None else kec_tables.OUTER_DIAMETERS
        self._diameters = MappingProxyType({
            key: MappingProxyType({float(s): d for s, d in by_size.items()})
            for key, by_size in diameters.items()
        })
        self._scaling = MappingProxyType(dict(
            diameter_scaling if diameter_scaling is not None else kec_tables.DIAMETER_SCALING
        ))

        ground = reduced_ground_size if reduced_ground_size is not None else kec_tables.REDUCED_GROUND_SIZE
        self._reduced_ground = MappingProxyType({float(p): float(g) for p, g in ground.items()})

        conduits = conduit_inner_diameters if conduit_inner_diameters is not None else kec_tables.CONDUIT_INNER_DIAMETERS
        self._conduits = tuple(sorted(
            ((name, circle_area(inner)) for name, inner in conduits),
            key=lambda entry: entry[1],
        ))

        logger.debug(
            "Catalog built: %d cable types, %d methods, %d ampacity cells, %d conduits",
            len(self._cable_types), len(self._methods), len(self._ampacity), len(self._conduits),
        )

    # --- Cable types ---

    def list_cable_types(self) -> Tuple[CableType, ...]:
        return tuple(self._cable_types.values())

    def cable_type(self, code: str) -> CableType:
        try:
            return self._cable_types[code]
        except KeyError:
            raise NotFound(f"Unknown cable type: {code!r}") from None

    def cable_options(self, code: str) -> dict:
        """Sizes and core configurations a cable type is made in."""
        cable = self.cable_type(code)
        return {
            "sizes": cable.sizes,
            "core_configurations": tuple(self._cores[c] for c in cable.core_configurations),
        }

    def all_sizes(self) -> Tuple[float, ...]:
        sizes = {s for cable in self._cable_types.values() for s in cable.sizes}
        return tuple(sorted(sizes))

    # --- Cores / methods ---

    def core_configurations(self) -> Tuple[CoreConfiguration, ...]:
        return tuple(self._cores.values())

    def core_configuration(self, code: str) -> CoreConfiguration:
        try:
            return self._cores[code]
        except KeyError:
            raise NotFound(f"Unknown core configuration: {code!r}") from None

    def install_methods(self) -> Tuple[InstallationMethod, ...]:
        return tuple(self._methods.values())

    def install_method(self, code: str) -> InstallationMethod:
        try:
            return self._methods[code]
        except KeyError:
            raise NotFound(f"Unknown installation method: {code!r}") from None

    # --- Ratings ---

    def ampacity(self, insulation, method: str, size: float, loaded_conductors: int = 3) -> float:
        """
        Base allowable current (A) for one table cell.
        Some method/size combinations are not defined by the standard,
        those raise NotFound instead of returning zero.
        """
        if loaded_conductors not in (2, 3):
            raise OutOfRange(f"Ampacity tables cover 2 or 3 loaded conductors, got {loaded_conductors}")
        try:
            key = (InsulationClass(insulation), method, float(size))
        except ValueError:
            raise NotFound(f"Unknown insulation class: {insulation!r}") from None
        rating = self._ampacity.get(key)
        if rating is None:
            raise NotFound(
                f"No ampacity for {key[0].value} / method {method} / {format_size(float(size))} mm²"
            )
        return rating.for_loaded(loaded_conductors)

    def derating(self, circuits: int) -> float:
        """
        Grouping factor for `circuits` bunched circuits (KEC Table B.52.17).

        The table stops at 20 circuits and has no row for zero. Counts outside
        that range raise OutOfRange; the engine never falls back to 1.0.
        """
        if circuits < 1:
            raise OutOfRange(f"Grouping needs at least one circuit, got {circuits}")
        for limit, factor in self._grouping.items():
            if circuits <= limit:
                return factor
        raise OutOfRange(
            f"Grouping factor is defined up to {max(self._grouping)} circuits, got {circuits}"
        )

    # --- Geometry ---

    def conductor_area(self, size: float) -> float:
        """Nominal copper cross-section (mm²) of one conductor of `size`."""
        size = float(size)
        if size not in self.all_sizes():
            raise NotFound(f"Unknown conductor size: {format_size(size)} mm²")
        return size

    def outer_diameter(self, cable_type: str, cores: str, size: float) -> float:
        size = float(size)
        measured = self._diameters.get((cable_type, cores))
        if measured is not None and size in measured:
            return measured[size]

        scaled = self._scaling.get((cable_type, cores))
        if scaled is not None:
            base_cores, multiplier = scaled
            base = self._diameters.get((cable_type, base_cores), {})
            if size in base:
                return base[size] * multiplier

        raise NotFound(f"No outer diameter for {cable_type} {cores} {format_size(size)} mm²")

    def ground_size(self, size: float, option: GroundWire) -> Optional[float]:
        """Protective conductor size for a phase conductor, None when not requested."""
        if option is GroundWire.NONE:
            return None
        if option is GroundWire.SAME_SIZE:
            return float(size)
        try:
            return self._reduced_ground[float(size)]
        except KeyError:
            raise NotFound(f"No reduced ground size for {format_size(float(size))} mm²") from None

    def conduit_area_table(self) -> Tuple[Tuple[str, float], ...]:
        """(Name, usable inner area mm²), ascending."""
        return self._conduits


# Built at import, shared read-only by every request
_DEFAULT = Catalog()

def default_catalog() -> Catalog:
    return _DEFAULT
