import logging
import math
from typing import Optional, Tuple
from core.calculator import CableSizingCalculator
from core.converters import circle_area, format_size
from core.errors import Incomplete, NotFound, OutOfRange
from core.models import CalculationRequest, System
from standards.catalog import Catalog, default_catalog
from standards.kec_tables import GROUND_WIRE_TYPE, MAX_FILL_RATIO, NONE_FOUND

logger = logging.getLogger(__name__)

class KECCalculator(CableSizingCalculator):
    """
    Cable and conduit sizing per KEC (IEC 60364-5-52 ampacity tables,
    Table B.52.17 grouping, KEC 232.2 conduit fill).
    """

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog or default_catalog()

    def validate(self, request: CalculationRequest) -> None:
        missing = [
            name for name in ("cable_type", "cores", "size", "quantity", "system", "install_method")
            if getattr(request, name) in (None, "")
        ]
        if missing:
            raise Incomplete(f"Selection incomplete, missing: {', '.join(missing)}")

        if request.quantity <= 0:
            raise OutOfRange(f"Quantity must be at least 1, got {request.quantity}")

        cable = self.catalog.cable_type(request.cable_type)
        if request.cores not in cable.core_configurations:
            raise NotFound(f"{cable.code} is not made as {request.cores}")

        core = self.catalog.core_configuration(request.cores)
        if not core.applies_to(request.system):
            system = getattr(request.system, "value", request.system)
            raise NotFound(f"{core.code} does not apply to a {system} system")

        if float(request.size) not in cable.sizes:
            raise OutOfRange(f"{cable.code} is not made in {format_size(float(request.size))} mm²")

        method = self.catalog.install_method(request.install_method)
        if not method.accepts(request.cores):
            raise NotFound(f"Method {method.code} does not apply to {request.cores} cables")

    def resolve_conductor_area(self, request: CalculationRequest) -> Tuple[float, Optional[float]]:
        core = self.catalog.core_configuration(request.cores)
        phase_area = self.catalog.conductor_area(request.size)
        area = phase_area * core.conductor_count * request.quantity

        ground_size = self.catalog.ground_size(request.size, request.ground_wire)
        if ground_size is not None:
            area += self.catalog.conductor_area(ground_size)

        logger.debug("Conductor area %s x%d x%d = %.2f mm² (ground %s)",
                     format_size(phase_area), core.conductor_count, request.quantity, area, ground_size)
        return area, ground_size

    def resolve_total_area(self, request: CalculationRequest, ground_size: Optional[float]) -> float:
        od = self.catalog.outer_diameter(request.cable_type, request.cores, request.size)
        total = circle_area(od) * request.quantity

        if ground_size is not None:
            ground_od = self.catalog.outer_diameter(GROUND_WIRE_TYPE, "1C", ground_size)
            total += circle_area(ground_od)

        logger.debug("Occupied area: OD %.2f mm x%d -> %.2f mm²", od, request.quantity, total)
        return total

    def count_circuits(self, request: CalculationRequest) -> int:
        """
        Single-core cables: every `loaded` cables make one circuit (a partial
        set still counts). Multi-core: each cable is one circuit, its cores
        are already covered by the 2/3-loaded table column.
        """
        core = self.catalog.core_configuration(request.cores)
        if core.is_single_core:
            per_circuit = request.system.loaded_conductors
            return math.ceil(request.quantity / per_circuit)
        return request.quantity

    def resolve_allowable_current(self, request: CalculationRequest) -> Tuple[float, float, float, int]:
        cable = self.catalog.cable_type(request.cable_type)
        loaded = request.system.loaded_conductors
        base = self.catalog.ampacity(cable.insulation, request.install_method, request.size, loaded)

        circuits = self.count_circuits(request)
        factor = self.catalog.derating(circuits)

        # Ambient correction fixed at 1.0 (30°C air / 20°C ground baseline)
        allowable = base * factor
        logger.debug("Allowable current %.1f A = %.1f A x %.2f (%d circuits, %d loaded)",
                     allowable, base, factor, circuits, loaded)
        return allowable, base, factor, circuits

    def recommend_conduit(self, total_area: float) -> Tuple[str, float]:
        conduits = self.catalog.conduit_area_table()
        for name, area in conduits:
            if area * MAX_FILL_RATIO >= total_area:
                return name, (total_area / area) * 100.0

        largest_name, largest_area = conduits[-1]
        fill = (total_area / largest_area) * 100.0
        logger.warning("No conduit keeps %.2f mm² under %.0f%% fill (%s would be %.1f%%)",
                       total_area, MAX_FILL_RATIO * 100, largest_name, fill)
        return NONE_FOUND, fill

    def describe_install_method(self, request: CalculationRequest, grouping_factor: float, circuits: int) -> str:
        method = self.catalog.install_method(request.install_method)
        if request.system is System.SINGLE_PHASE:
            loaded_label = "2 loaded (1Φ)"
        else:
            loaded_label = "3 loaded (3Φ)"
        return f"{method.description} / {loaded_label} / grouping factor: {grouping_factor:.2f} ({circuits} circuits)"
