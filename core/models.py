from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional

class System(Enum):
    SINGLE_PHASE = "1Φ"
    THREE_PHASE = "3Φ"

    @property
    def loaded_conductors(self) -> int:
        # KEC B.52: 1Φ -> 2 loaded conductors, 3Φ -> 3 loaded conductors
        return 2 if self is System.SINGLE_PHASE else 3

class GroundWire(Enum):
    NONE = "none"
    SAME_SIZE = "same"
    REDUCED_SIZE = "reduced"

class InsulationClass(Enum):
    PVC = "PVC"    # 70°C
    XLPE = "XLPE"  # 90°C (XLPE / EPR / HFIX polyolefin)

@dataclass(frozen=True)
class CalculationRequest:
    cable_type: str
    cores: str
    size: float  # mm²
    quantity: int
    system: System
    ground_wire: GroundWire = GroundWire.NONE
    install_method: str = ""

@dataclass(frozen=True)
class CalculationResult:
    total_area: float         # mm², cable bundle incl. ground wire
    conductor_area: float     # mm², copper only
    allowable_current: float  # A, after grouping factor
    install_method_desc: str
    recommended_conduit: str
    fill_rate: float          # %
    base_current: float = 0.0
    grouping_factor: float = 1.0
    circuits: int = 1
    loaded_conductors: int = 3
    ground_size: Optional[float] = None

    def as_dict(self) -> dict:
        return asdict(self)
