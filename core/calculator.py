from abc import ABC, abstractmethod
from typing import Optional, Tuple
from .models import CalculationRequest, CalculationResult

class CableSizingCalculator(ABC):

    @abstractmethod
    def validate(self, request: CalculationRequest) -> None:
        """Raises if the request's codes do not jointly exist in the catalog."""
        pass

    @abstractmethod
    def resolve_conductor_area(self, request: CalculationRequest) -> Tuple[float, Optional[float]]:
        """Copper cross-section of the bundle. Returns (Area mm², Ground size or None)."""
        pass

    @abstractmethod
    def resolve_total_area(self, request: CalculationRequest, ground_size: Optional[float]) -> float:
        """Area the cable bundle occupies inside a conduit (mm²)."""
        pass

    @abstractmethod
    def resolve_allowable_current(self, request: CalculationRequest) -> Tuple[float, float, float, int]:
        """Returns (Allowable current, Base current, Grouping factor, Circuits)."""
        pass

    @abstractmethod
    def recommend_conduit(self, total_area: float) -> Tuple[str, float]:
        """Returns (Conduit name, Fill rate %)."""
        pass

    @abstractmethod
    def describe_install_method(self, request: CalculationRequest, grouping_factor: float, circuits: int) -> str:
        pass

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        """Runs the full sizing pipeline for one request."""
        self.validate(request)
        conductor_area, ground_size = self.resolve_conductor_area(request)
        total_area = self.resolve_total_area(request, ground_size)
        allowable, base, factor, circuits = self.resolve_allowable_current(request)
        conduit, fill_rate = self.recommend_conduit(total_area)
        return CalculationResult(
            total_area=total_area,
            conductor_area=conductor_area,
            allowable_current=allowable,
            install_method_desc=self.describe_install_method(request, factor, circuits),
            recommended_conduit=conduit,
            fill_rate=fill_rate,
            base_current=base,
            grouping_factor=factor,
            circuits=circuits,
            loaded_conductors=request.system.loaded_conductors,
            ground_size=ground_size,
        )
