from dataclasses import dataclass
from typing import FrozenSet, Tuple
from .models import InsulationClass, System

@dataclass(frozen=True)
class CoreConfiguration:
    code: str
    name: str
    cores: int            # physical cores in one cable
    conductor_count: int  # current-carrying conductors
    systems: FrozenSet[System]

    def applies_to(self, system: System) -> bool:
        return system in self.systems

    @property
    def is_single_core(self) -> bool:
        return self.cores == 1

@dataclass(frozen=True)
class CableType:
    code: str
    name: str
    description: str
    insulation: InsulationClass
    max_temperature: int  # °C
    sizes: Tuple[float, ...]
    core_configurations: Tuple[str, ...]

@dataclass(frozen=True)
class InstallationMethod:
    code: str
    name: str
    description: str
    cores: FrozenSet[str]  # core configuration codes it may be paired with

    def accepts(self, cores_code: str) -> bool:
        return cores_code in self.cores

@dataclass(frozen=True)
class AmpacityRating:
    """Base current (A) at 30°C air / 20°C ground for one table cell."""
    two_loaded: float
    three_loaded: float

    def for_loaded(self, loaded_conductors: int) -> float:
        return self.two_loaded if loaded_conductors == 2 else self.three_loaded
